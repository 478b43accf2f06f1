"""xsemver command-line interface."""
