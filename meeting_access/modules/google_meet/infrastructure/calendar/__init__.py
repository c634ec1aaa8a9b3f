from .google_calendar_service import GoogleCalendarService

__all__ = ['GoogleCalendarService']
