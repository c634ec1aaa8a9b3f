from dataclasses import dataclass, field
from datetime import datetime

from meeting_access.modules.provisioning.domain.entities import Platform


@dataclass(slots=True, frozen=True)
class ProvisionedLink:
    join_url: str
    calendar_event_id: str
    expires_at: datetime
    html_link: str | None = None
    platform: Platform = field(default=Platform.GOOGLE_MEET, init=False)
