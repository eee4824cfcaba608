"""Errors that archforge lets escape to the caller.

Malformed model output is never one of them: the extractor absorbs it and
returns an empty diagram with diagnostics instead.
"""


class ArchforgeError(Exception):
    """Base class for archforge errors."""


class ConfigurationError(ArchforgeError):
    """Required configuration (e.g. the provider API key) is missing."""


class InvalidRequestError(ArchforgeError):
    """The inbound prompt/model pair is not acceptable."""


class ProviderError(ArchforgeError):
    """The completion provider could not be reached or returned a non-success status."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ProviderTimeoutError(ProviderError):
    """The completion request exceeded its timeout and was abandoned."""


class ProviderResponseError(ProviderError):
    """The provider answered, but not with the expected completion envelope."""
