"""Access key issuance with a random salt and a wall-clock expiry."""

from __future__ import annotations

import logging
import secrets
from datetime import datetime
from typing import Callable, Iterable, Optional, Tuple

from ..config import AccessKeyConfig, DEFAULT_TTL_SECONDS
from ..privilege import PrivilegeLike
from ..utils.time import unix_seconds, utc_now
from .envelope import generate_signed_token
from .types import IdentityLike, IssuedToken, PrivilegeGrant

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
SaltSource = Callable[[], int]


def random_salt() -> int:
    """Return a salt drawn uniformly from the full unsigned 32-bit range."""
    return secrets.randbits(32)


class AccessKeyIssuer:
    """Issue signed access keys for one app."""

    def __init__(
        self,
        config: Optional[AccessKeyConfig] = None,
        *,
        clock: Clock = utc_now,
        salt_source: SaltSource = random_salt,
    ) -> None:
        self.config = config or AccessKeyConfig.from_env()
        self.config.validate()
        self._clock = clock
        self._salt_source = salt_source

    def issue(
        self,
        channel_name: str,
        identity: IdentityLike,
        privileges: Iterable[PrivilegeLike],
        *,
        ttl_seconds: Optional[int] = None,
    ) -> IssuedToken:
        """Grant every privilege until now + ttl and sign the token."""
        ttl = self.config.ttl_seconds if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            raise ValueError(f"`ttl_seconds` must be positive, got {ttl}.")
        expires_at = unix_seconds(self._clock()) + ttl
        salt = self._salt_source()
        grants = _grants_until(privileges, expires_at)

        token = generate_signed_token(
            self.config.app_id,
            self.config.app_certificate,
            channel_name,
            identity,
            grants,
            salt,
            expires_at,
        )
        logger.debug(
            "issued access key app_id=%s channel=%s privileges=%d expires_at=%d",
            self.config.app_id,
            channel_name,
            len(grants),
            expires_at,
        )
        return IssuedToken(token=token, salt=salt, expires_at=expires_at, channel_name=channel_name, grants=grants)


def _grants_until(privileges: Iterable[PrivilegeLike], expires_at: int) -> Tuple[PrivilegeGrant, ...]:
    return tuple(PrivilegeGrant.of(privilege, expires_at) for privilege in privileges)


def new_token(
    app_id: str,
    app_certificate: str,
    channel_name: str,
    identity: IdentityLike,
    privileges: Iterable[PrivilegeLike],
    *,
    clock: Clock = utc_now,
    salt_source: SaltSource = random_salt,
) -> str:
    """Return a token granting ``privileges`` for one day.

    Every privilege shares the token expiry; use ``generate_signed_token`` for
    per-privilege expiries.
    """
    expires_at = unix_seconds(clock()) + DEFAULT_TTL_SECONDS
    salt = salt_source()
    grants = _grants_until(privileges, expires_at)
    return generate_signed_token(app_id, app_certificate, channel_name, identity, grants, salt, expires_at)
