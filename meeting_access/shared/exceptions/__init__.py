from meeting_access.shared.exceptions.auth import UnauthorizedException
from meeting_access.shared.exceptions.provisioning import (
    ConfigurationException, InvalidRequestException,
    MissingAuthorizationException, ProvisioningException,
    RateLimitedException, UpstreamAuthException,
    UpstreamUnavailableException)

__all__ = [
    'ConfigurationException',
    'InvalidRequestException',
    'MissingAuthorizationException',
    'ProvisioningException',
    'RateLimitedException',
    'UnauthorizedException',
    'UpstreamAuthException',
    'UpstreamUnavailableException',
]
