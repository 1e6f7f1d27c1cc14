"""Privilege enumeration and registry APIs."""

from .registry import PrivilegeLike, privilege_code, privileges, to_privilege, wire_name, wire_privileges
from .types import Privilege

__all__ = [
    "Privilege",
    "PrivilegeLike",
    "privilege_code",
    "privileges",
    "to_privilege",
    "wire_name",
    "wire_privileges",
]
