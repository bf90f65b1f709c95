"""An in-memory staff register with role models, validation and a terminal front end."""

__version__ = "1.0.0"
__all__ = ["models", "dialogs", "registry", "cli"]