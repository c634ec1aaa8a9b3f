from .calendar_link_provisioner import CalendarLinkProvisioner

__all__ = ['CalendarLinkProvisioner']
