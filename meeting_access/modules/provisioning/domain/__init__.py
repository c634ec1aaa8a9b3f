from meeting_access.modules.provisioning.domain.entities import (
    MeetingRequest, MeetingRole, OAuthCredential, Platform)

__all__ = ['MeetingRequest', 'MeetingRole', 'OAuthCredential', 'Platform']
