from dishka import Provider, Scope, provide

from meeting_access.modules.google_meet.application import \
    CalendarLinkProvisioner
from meeting_access.modules.google_meet.config import (GoogleCalendarConfig,
                                                       GoogleMeetModuleConfig)
from meeting_access.modules.google_meet.infrastructure.calendar import \
    GoogleCalendarService


class GoogleMeetModuleProvider(Provider):
    @provide(scope=Scope.APP)
    def get_google_meet_config(self) -> GoogleMeetModuleConfig:
        return GoogleMeetModuleConfig()

    @provide(scope=Scope.APP)
    def get_google_calendar_config(
        self, config: GoogleMeetModuleConfig
    ) -> GoogleCalendarConfig:
        return config.calendar

    @provide(scope=Scope.APP)
    def get_google_calendar_service(self, config: GoogleCalendarConfig) -> GoogleCalendarService:
        return GoogleCalendarService(
            api_base=config.api_base,
            calendar_id=config.calendar_id,
            timeout_seconds=config.timeout_seconds,
        )

    @provide(scope=Scope.APP)
    def get_calendar_link_provisioner(
        self,
        calendar_service: GoogleCalendarService,
        config: GoogleCalendarConfig,
    ) -> CalendarLinkProvisioner:
        return CalendarLinkProvisioner(
            calendar_service=calendar_service,
            default_summary=config.default_summary,
            timeout_seconds=config.timeout_seconds,
        )
