"""Exception types raised by the theme generator."""


class ThemeError(Exception):
    """Base class for every error raised by the generator."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})


class ThemeValidationError(ThemeError, ValueError):
    """Input that cannot be defaulted: oversized files, bad arguments."""


class InvalidColorError(ThemeValidationError):
    """A value that is not a hex color."""

    def __init__(self, value):
        super().__init__(f"Invalid hex color: {value!r}", {"value": value})
        self.value = value


class ThemeFileError(ThemeError):
    """A theme file that could not be read."""


class ThemeAssemblyError(ThemeError):
    """The final theme document could not be built."""
