"""Access key datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from ..errors import FieldOverflowError
from ..privilege import Privilege, PrivilegeLike, to_privilege

UINT64_MAX = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class EmptyIdentity:
    """No user identity; the token is valid for any uid."""


@dataclass(frozen=True)
class NumericIdentity:
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= UINT64_MAX:
            raise FieldOverflowError(f"Numeric identity {self.value} does not fit in an unsigned 64-bit integer.")


@dataclass(frozen=True)
class TextIdentity:
    value: str


Identity = Union[EmptyIdentity, NumericIdentity, TextIdentity]
IdentityLike = Union[Identity, int, str, None]


def to_identity(value: IdentityLike) -> Identity:
    """Lift a raw uid (``None``, ``int`` or ``str``) into an ``Identity``."""
    if isinstance(value, (EmptyIdentity, NumericIdentity, TextIdentity)):
        return value
    if value is None or value == "":
        return EmptyIdentity()
    # bool is an int subclass but never a valid uid
    if isinstance(value, bool):
        raise TypeError("Identity must be an int or str, not bool.")
    if isinstance(value, int):
        return NumericIdentity(value)
    if isinstance(value, str):
        return TextIdentity(value)
    raise TypeError(f"Identity must be an int or str, not {type(value).__name__}.")


def canonical_identity(value: IdentityLike) -> str:
    """Return the identity string that is signed and checksummed.

    Only the numeric uid ``0`` collapses to the empty string. The text ``"0"``
    is kept as-is because verifiers compute the same asymmetric rendering.
    """
    identity = to_identity(value)
    if isinstance(identity, NumericIdentity):
        return "" if identity.value == 0 else str(identity.value)
    if isinstance(identity, TextIdentity):
        return identity.value
    return ""


@dataclass(frozen=True)
class PrivilegeGrant:
    """A privilege paired with its own expiry (Unix seconds)."""

    privilege: Privilege
    expires_at: int

    @classmethod
    def of(cls, privilege: PrivilegeLike, expires_at: int) -> "PrivilegeGrant":
        return cls(privilege=to_privilege(privilege), expires_at=expires_at)


GrantLike = Union[PrivilegeGrant, Tuple[PrivilegeLike, int]]


def to_grants(grants: Iterable[GrantLike]) -> Tuple[PrivilegeGrant, ...]:
    """Normalize grants given as ``PrivilegeGrant`` or ``(name, expires_at)`` pairs."""
    normalized = []
    for grant in grants:
        if isinstance(grant, PrivilegeGrant):
            normalized.append(grant)
        elif isinstance(grant, (tuple, list)) and len(grant) == 2:
            privilege, expires_at = grant
            normalized.append(PrivilegeGrant.of(privilege, expires_at))
        else:
            raise TypeError(f"Grant must be a PrivilegeGrant or (privilege, expires_at) pair, got {grant!r}.")
    return tuple(normalized)


@dataclass(frozen=True)
class TokenRequest:
    """All inputs needed to sign one access key."""

    app_id: str
    app_certificate: str
    channel_name: str
    identity: Identity
    grants: Tuple[PrivilegeGrant, ...]
    salt: int
    ts: int

    @classmethod
    def build(
        cls,
        *,
        app_id: str,
        app_certificate: str,
        channel_name: str,
        identity: IdentityLike,
        grants: Iterable[GrantLike],
        salt: int,
        ts: int,
    ) -> "TokenRequest":
        return cls(
            app_id=app_id,
            app_certificate=app_certificate,
            channel_name=channel_name,
            identity=to_identity(identity),
            grants=to_grants(grants),
            salt=salt,
            ts=ts,
        )

    def encode(self) -> str:
        from .envelope import generate_signed_token

        return generate_signed_token(
            self.app_id,
            self.app_certificate,
            self.channel_name,
            self.identity,
            self.grants,
            self.salt,
            self.ts,
        )


@dataclass(frozen=True)
class IssuedToken:
    token: str
    salt: int
    expires_at: int
    channel_name: str
    grants: Tuple[PrivilegeGrant, ...]
