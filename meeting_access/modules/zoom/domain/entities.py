from dataclasses import dataclass, field

from meeting_access.modules.provisioning.domain.entities import (MeetingRole,
                                                                 Platform)
from meeting_access.shared.exceptions import InvalidRequestException


@dataclass(slots=True, frozen=True)
class JoinCredential:
    sdk_key: str
    meeting_number: str
    timestamp: int
    role: MeetingRole
    signature: str
    token: str
    valid_until: int
    platform: Platform = field(default=Platform.ZOOM, init=False)


@dataclass(slots=True, frozen=True)
class DecodedJoinToken:
    sdk_key: str
    meeting_number: str
    timestamp: int
    role: int
    signature: str


def normalize_meeting_number(meeting_number: str | None) -> str:
    cleaned = meeting_number.replace(' ', '').replace('-', '') if meeting_number else ''
    if not cleaned or not (cleaned.isascii() and cleaned.isdigit()):
        raise InvalidRequestException(f'Invalid meeting number: {meeting_number!r}')
    return cleaned
