"""Exceptions raised by apibook."""


class ApibookError(Exception):
    """Base class for errors reported back to the caller."""


class CollectionParseError(ApibookError):
    """Raised when collection bytes are not a usable Postman export."""


class ConfigError(ApibookError):
    """Raised when settings cannot be loaded."""
