"""The ``utilkit`` command-line interface."""
