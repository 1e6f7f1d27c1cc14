"""Access key construction, signing and issuance."""

from .envelope import VERSION, build_content, generate_signed_token
from .issuer import AccessKeyIssuer, new_token, random_salt
from .message import build_message
from .signer import sign, signing_payload
from .types import (
    EmptyIdentity,
    Identity,
    IssuedToken,
    NumericIdentity,
    PrivilegeGrant,
    TextIdentity,
    TokenRequest,
    canonical_identity,
    to_identity,
)

__all__ = [
    "VERSION",
    "AccessKeyIssuer",
    "EmptyIdentity",
    "Identity",
    "IssuedToken",
    "NumericIdentity",
    "PrivilegeGrant",
    "TextIdentity",
    "TokenRequest",
    "build_content",
    "build_message",
    "canonical_identity",
    "generate_signed_token",
    "new_token",
    "random_salt",
    "sign",
    "signing_payload",
    "to_identity",
]
