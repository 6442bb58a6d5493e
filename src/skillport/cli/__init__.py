"""skillport command-line interface."""
