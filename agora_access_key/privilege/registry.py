"""Registry mapping privileges to their wire codes."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

from ..errors import UnknownPrivilegeError
from .types import Privilege

PrivilegeLike = Union[str, Privilege]

_REGISTRY: Dict[Privilege, Tuple[str, int]] = {
    Privilege.JOIN_CHANNEL: ("kJoinChannel", 1),
    Privilege.PUBLISH_AUDIO: ("kPublishAudioStream", 2),
    Privilege.PUBLISH_VIDEO: ("kPublishVideoStream", 3),
    Privilege.PUBLISH_DATA: ("kPublishDataStream", 4),
    Privilege.PUBLISH_AUDIO_CDN: ("kPublishAudioCdn", 5),
    Privilege.PUBLISH_VIDEO_CDN: ("kPublishVideoCdn", 6),
    Privilege.REQUEST_PUBLISH_AUDIO: ("kRequestPublishAudioStream", 7),
    Privilege.REQUEST_PUBLISH_VIDEO: ("kRequestPublishVideoStream", 8),
    Privilege.REQUEST_PUBLISH_DATA: ("kRequestPublishDataStream", 9),
    Privilege.INVITE_PUBLISH_AUDIO: ("kInvitePublishAudioStream", 10),
    Privilege.INVITE_PUBLISH_VIDEO: ("kInvitePublishVideoStream", 11),
    Privilege.INVITE_PUBLISH_DATA: ("kInvitePublishDataStream", 12),
    Privilege.ADMINISTRATE_CHANNEL: ("kAdministrateChannel", 101),
    Privilege.RTM_LOGIN: ("kRtmLogin", 1000),
}

_missing = set(Privilege) - set(_REGISTRY)
if _missing:
    raise RuntimeError(f"Privileges without a wire code: {sorted(p.value for p in _missing)}")

_BY_NAME: Mapping[str, int] = MappingProxyType({p.value: code for p, (_, code) in _REGISTRY.items()})
_BY_WIRE_NAME: Mapping[str, int] = MappingProxyType({wire: code for wire, code in _REGISTRY.values()})


def to_privilege(value: PrivilegeLike) -> Privilege:
    """Resolve a symbolic name or enum member to a ``Privilege``."""
    if isinstance(value, Privilege):
        return value
    try:
        return Privilege(value)
    except ValueError:
        raise UnknownPrivilegeError(f"Unknown privilege {value!r}.") from None


def privilege_code(value: PrivilegeLike) -> int:
    """Return the wire code for a privilege, e.g. 1 for ``join_channel``."""
    return _REGISTRY[to_privilege(value)][1]


def wire_name(value: PrivilegeLike) -> str:
    """Return the protocol-level name, e.g. ``kJoinChannel``."""
    return _REGISTRY[to_privilege(value)][0]


def privileges() -> Mapping[str, int]:
    """Return the read-only name -> code mapping."""
    return _BY_NAME


def wire_privileges() -> Mapping[str, int]:
    """Return the read-only wire name -> code mapping."""
    return _BY_WIRE_NAME
