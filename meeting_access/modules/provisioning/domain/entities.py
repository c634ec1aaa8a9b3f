from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum as PyEnum, IntEnum


class Platform(str, PyEnum):
    GOOGLE_MEET = 'google_meet'
    ZOOM = 'zoom'


class MeetingRole(IntEnum):
    PARTICIPANT = 0
    HOST = 1


@dataclass(slots=True, frozen=True)
class MeetingRequest:
    platform: Platform
    requester_id: str
    role: MeetingRole
    desired_start: datetime
    duration_seconds: int
    meeting_number: str | None = None
    summary: str | None = None
    description: str = ''
    attendees: tuple[str, ...] = ()
    idempotency_key: str | None = None


@dataclass(slots=True, frozen=True)
class OAuthCredential:
    access_token: str = field(repr=False)
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        if self.expires_at is None:
            return False
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at <= now
