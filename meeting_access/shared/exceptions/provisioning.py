"""Typed failures raised by the provisioning core.

Every failure path ends in one of these, so callers never receive a partial
link or credential.
"""


class ProvisioningException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestException(ProvisioningException):
    """Malformed or unsupported request. Never reaches the network."""


class MissingAuthorizationException(ProvisioningException):
    """No usable OAuth credential was supplied; the user must re-authenticate."""


class UpstreamAuthException(ProvisioningException):
    """The calendar service rejected the supplied credential."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamUnavailableException(ProvisioningException):
    """Transient upstream failure. Retry with backoff and a fresh idempotency key."""


class RateLimitedException(ProvisioningException):
    def __init__(self, message: str, retry_after: int):
        super().__init__(message)
        self.retry_after = retry_after


class ConfigurationException(ProvisioningException):
    """Required configuration is missing. Fatal at startup."""
