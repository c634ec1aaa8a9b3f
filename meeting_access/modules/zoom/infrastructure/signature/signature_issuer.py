"""Meeting SDK join signatures.

Token layout, before the outer base64:

    <sdk_key>.<meeting_number>.<timestamp_ms>.<role>.<digest>

where ``digest`` is base64(HMAC-SHA256(secret, base64(sdk_key + meeting_number
+ timestamp_ms + role))).
"""
import base64
import binascii
import hashlib
import hmac
import logging
import time
from collections.abc import Callable

from meeting_access.modules.provisioning.application.interfaces import \
    ISignatureIssuer
from meeting_access.modules.provisioning.domain.entities import MeetingRole
from meeting_access.modules.zoom.config import ZoomSdkConfig
from meeting_access.modules.zoom.domain.entities import (
    DecodedJoinToken, JoinCredential, normalize_meeting_number)
from meeting_access.shared.exceptions import (ConfigurationException,
                                              InvalidRequestException)

logger = logging.getLogger(__name__)

TOKEN_DELIMITER = '.'


def compute_digest(secret: bytes, sdk_key: str, meeting_number: str, timestamp: int, role: int) -> str:
    message = base64.b64encode(f'{sdk_key}{meeting_number}{timestamp}{role}'.encode())
    mac = hmac.new(secret, message, hashlib.sha256).digest()
    return base64.b64encode(mac).decode()


def decode_join_token(token: str) -> DecodedJoinToken:
    try:
        raw = base64.b64decode(token.encode(), validate=True).decode()
    except (binascii.Error, UnicodeDecodeError) as e:
        raise InvalidRequestException('Join token is not valid base64') from e

    parts = raw.split(TOKEN_DELIMITER)
    if len(parts) != 5:
        raise InvalidRequestException(f'Join token has {len(parts)} fields, expected 5')

    sdk_key, meeting_number, timestamp, role, signature = parts
    if not timestamp.isdigit() or role not in ('0', '1'):
        raise InvalidRequestException('Join token has malformed timestamp or role')

    return DecodedJoinToken(
        sdk_key=sdk_key,
        meeting_number=meeting_number,
        timestamp=int(timestamp),
        role=int(role),
        signature=signature,
    )


class SignatureIssuer(ISignatureIssuer):
    def __init__(self, config: ZoomSdkConfig, clock: Callable[[], float] = time.time):
        sdk_key = config.sdk_key.strip()
        secret = config.sdk_secret.get_secret_value()
        if not sdk_key:
            raise ConfigurationException('ZOOM_SDK_SDK_KEY is not configured')
        if not secret:
            raise ConfigurationException('ZOOM_SDK_SDK_SECRET is not configured')
        if TOKEN_DELIMITER in sdk_key:
            raise ConfigurationException('Zoom SDK key must not contain "."')

        self._sdk_key = sdk_key
        self._secret = secret.encode()
        self._clock_skew_ms = config.clock_skew_seconds * 1000
        self._validity_ms = config.token_validity_seconds * 1000
        self._clock = clock

    def issue(self, meeting_number: str, role: MeetingRole) -> JoinCredential:
        if not isinstance(role, MeetingRole):
            raise InvalidRequestException(f'Unsupported role: {role!r}')
        meeting_number = normalize_meeting_number(meeting_number)

        timestamp = round(self._clock() * 1000) - self._clock_skew_ms
        role_code = int(role)
        digest = compute_digest(self._secret, self._sdk_key, meeting_number, timestamp, role_code)

        raw = TOKEN_DELIMITER.join(
            (self._sdk_key, meeting_number, str(timestamp), str(role_code), digest)
        )
        token = base64.b64encode(raw.encode()).decode()

        logger.info(f'Issued join signature for meeting {meeting_number} as {role.name.lower()}')

        return JoinCredential(
            sdk_key=self._sdk_key,
            meeting_number=meeting_number,
            timestamp=timestamp,
            role=role,
            signature=digest,
            token=token,
            valid_until=timestamp + self._validity_ms,
        )

    def verify(self, token: str) -> bool:
        try:
            decoded = decode_join_token(token)
        except InvalidRequestException:
            return False

        if decoded.sdk_key != self._sdk_key:
            return False

        expected = compute_digest(
            self._secret,
            decoded.sdk_key,
            decoded.meeting_number,
            decoded.timestamp,
            decoded.role,
        )
        return hmac.compare_digest(expected, decoded.signature)
