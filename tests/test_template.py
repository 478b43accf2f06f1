"""Tests for tag format templates."""

from xsemver._template import (
    TAG_FORMAT,
    Placeholder,
    TagTemplate,
    compile_template,
    tokenize,
)


def test_tokenize_default_format() -> None:
    """Test the default template splits into literals and placeholders."""
    assert tokenize(TAG_FORMAT) == (
        "v",
        Placeholder.MAJOR,
        ".",
        Placeholder.MINOR,
        ".",
        Placeholder.PATCH,
        Placeholder.SPECIAL,
    )


def test_tokenize_unknown_percent_is_literal() -> None:
    """Test a % not followed by a placeholder letter stays literal."""
    assert tokenize("%x%M%") == ("%x", Placeholder.MAJOR, "%")


def test_tokenize_scans_left_to_right() -> None:
    """Test %%M is a literal percent followed by the major placeholder."""
    assert tokenize("%%M") == ("%", Placeholder.MAJOR)


def test_tokenize_empty() -> None:
    """Test an empty template has no tokens."""
    assert tokenize("") == ()


def test_placeholder_group_names() -> None:
    """Test placeholders map to the SemVer attribute names."""
    assert [p.group for p in Placeholder] == ["major", "minor", "patch", "special"]


def test_compile_template_is_cached() -> None:
    """Test the same template string compiles to the same object."""
    assert compile_template("r%M-%m") is compile_template("r%M-%m")


def test_placeholders_property() -> None:
    """Test the set of placeholders used by a template."""
    template = compile_template("%M.%m")
    assert template.placeholders == frozenset({Placeholder.MAJOR, Placeholder.MINOR})


def test_default_pattern() -> None:
    """Test the regex compiled from the default template."""
    assert compile_template(TAG_FORMAT).pattern.pattern == (
        r"v(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
        r"(?:-(?P<special>[A-Za-z][0-9A-Za-z.]+))?"
    )


def test_literals_are_escaped() -> None:
    """Test regex metacharacters in literals match literally."""
    template = compile_template("(%M+%m)")
    assert template.match("(1+2)") == {"major": "1", "minor": "2"}
    assert template.match("11+2)") is None


def test_match_without_special() -> None:
    """Test an optional special that did not participate is None."""
    assert compile_template(TAG_FORMAT).match("v1.2.3") == {
        "major": "1",
        "minor": "2",
        "patch": "3",
        "special": None,
    }


def test_match_is_a_search() -> None:
    """Test the template may match anywhere in the string."""
    groups = compile_template("%M.%m.%p").match("release 10.20.30 final")
    assert groups == {"major": "10", "minor": "20", "patch": "30"}


def test_repeated_placeholder_must_agree() -> None:
    """Test a repeated placeholder matches the same text both times."""
    template = compile_template("%M-%M")
    assert template.match("7-7") == {"major": "7"}
    assert template.match("7-8") is None


def test_render_does_not_rescan_output() -> None:
    """Test substituted text is never treated as a placeholder."""
    template = compile_template("%%sM")
    assert template.render({Placeholder.SPECIAL: ""}) == "%M"


def test_render_literal_only() -> None:
    """Test a template with no placeholders renders as itself."""
    assert TagTemplate("plain", tokenize("plain")).render({}) == "plain"
