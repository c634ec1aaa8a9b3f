from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent.parent / '.env'


class GoogleCalendarConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='GOOGLE_CALENDAR_',
        env_file=ENV_FILE,
        extra='ignore',
    )

    api_base: str = 'https://www.googleapis.com/calendar/v3'
    calendar_id: str = 'primary'
    timeout_seconds: float = 10.0
    default_summary: str = 'Meeting'


class GoogleMeetModuleConfig(BaseSettings):
    calendar: GoogleCalendarConfig = GoogleCalendarConfig()
