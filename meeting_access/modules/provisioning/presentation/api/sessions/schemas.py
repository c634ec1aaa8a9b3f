from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from meeting_access.modules.provisioning.domain.entities import Platform


class CreateSessionRequest(BaseModel):
    platform: Platform = Field(..., description='Conferencing platform to provision')
    role: Literal['host', 'participant'] = Field('participant', description='Role granted in the meeting')
    desired_start: Optional[datetime] = Field(None, description='Timezone-aware start, defaults to now')
    duration_seconds: int = Field(3600, description='Meeting length in seconds')
    meeting_number: Optional[str] = Field(None, description='Zoom meeting number, required for Zoom')
    summary: Optional[str] = Field(None, description='Calendar event title')
    description: str = Field('', description='Calendar event description')
    attendees: list[str] = Field(default_factory=list, description='Attendee emails')
    idempotency_key: Optional[str] = Field(None, description='Stable key for retry-safe creation')


class ProvisionedLinkResponse(BaseModel):
    platform: Literal['google_meet'] = 'google_meet'
    join_url: str
    calendar_event_id: str
    expires_at: datetime
    html_link: Optional[str] = None


class JoinCredentialResponse(BaseModel):
    platform: Literal['zoom'] = 'zoom'
    sdk_key: str
    meeting_number: str
    timestamp: int
    role: int
    signature: str
    token: str
    valid_until: int


SessionResponse = Annotated[
    Union[ProvisionedLinkResponse, JoinCredentialResponse],
    Field(discriminator='platform'),
]


class HealthResponse(BaseModel):
    status: str
    platforms: list[str]
