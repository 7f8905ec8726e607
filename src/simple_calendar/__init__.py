"""Single-user appointment calendar."""

__version__ = "1.0.0"
