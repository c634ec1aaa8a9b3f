from abc import ABC, abstractmethod

from meeting_access.modules.google_meet.domain.entities import ProvisionedLink
from meeting_access.modules.provisioning.domain.entities import (
    MeetingRequest, MeetingRole, OAuthCredential)
from meeting_access.modules.zoom.domain.entities import JoinCredential


class IRateLimiter(ABC):
    @abstractmethod
    async def check_and_increment(self, key: str) -> bool:
        """Count one call for ``key``; False if the key is over its limit."""
        raise NotImplementedError


class ICalendarLinkProvisioner(ABC):
    @abstractmethod
    async def provision(
        self,
        credential: OAuthCredential,
        request: MeetingRequest,
    ) -> ProvisionedLink:
        raise NotImplementedError


class ISignatureIssuer(ABC):
    @abstractmethod
    def issue(self, meeting_number: str, role: MeetingRole) -> JoinCredential:
        raise NotImplementedError
