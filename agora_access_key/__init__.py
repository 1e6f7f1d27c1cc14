"""Agora access key package.

Builds and signs version ``006`` access keys granting time-bounded channel
privileges.
"""

from .config import AccessKeyConfig
from .errors import AccessKeyError, FieldOverflowError, InvalidKeyError, UnknownPrivilegeError
from .privilege import Privilege, privilege_code, privileges
from .token import AccessKeyIssuer, IssuedToken, PrivilegeGrant, generate_signed_token, new_token

__all__ = [
    "AccessKeyConfig",
    "AccessKeyError",
    "AccessKeyIssuer",
    "FieldOverflowError",
    "InvalidKeyError",
    "IssuedToken",
    "Privilege",
    "PrivilegeGrant",
    "UnknownPrivilegeError",
    "generate_signed_token",
    "new_token",
    "privilege_code",
    "privileges",
]
