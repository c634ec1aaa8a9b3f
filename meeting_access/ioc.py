from dishka import AsyncContainer, Provider, make_async_container

from meeting_access.modules.google_meet.ioc import GoogleMeetModuleProvider
from meeting_access.modules.provisioning.ioc import ProvisioningModuleProvider
from meeting_access.modules.zoom.ioc import ZoomModuleProvider
from meeting_access.shared.config import Settings, get_settings
from meeting_access.shared.ioc import SharedInfrastructureProvider


def create_container(
    settings: Settings | None = None,
    *overrides: Provider,
) -> AsyncContainer:
    settings = settings or get_settings()

    container = make_async_container(
        SharedInfrastructureProvider(),
        ZoomModuleProvider(),
        GoogleMeetModuleProvider(),
        ProvisioningModuleProvider(),
        *overrides,
        context={Settings: settings}
    )

    return container
