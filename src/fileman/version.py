"""Single source of truth for the fileman version string."""

__version__: str = "0.1.0"
