from meeting_access.modules.google_meet.domain.entities import ProvisionedLink
from meeting_access.modules.zoom.domain.entities import JoinCredential

# Tagged by ``platform``: Google results carry a URL to open, Zoom results a
# credential for the embedded SDK.
SessionResult = ProvisionedLink | JoinCredential
