"""Domain-specific exceptions."""


class HowToError(Exception):
    """Base class for all errors raised by the service."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(HowToError):
    """User input failed the query-shape check. Always user-correctable."""

    status_code = 400


class ConfigurationError(HowToError):
    """A required provider credential is missing."""


class MissingYouTubeKeyError(ConfigurationError):
    pass


class MissingSearchCredentialsError(ConfigurationError):
    pass


class MissingOpenAIKeyError(ConfigurationError):
    pass


class UpstreamError(HowToError):
    """A provider returned a non-success status or a malformed payload."""


class StorageError(HowToError):
    """Client-local persistence failed to read or write."""
