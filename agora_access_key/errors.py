"""Exception hierarchy for access key generation."""


class AccessKeyError(ValueError):
    """Base class for all access key errors."""


class UnknownPrivilegeError(AccessKeyError):
    """Raised when a privilege symbol is outside the closed set."""


class FieldOverflowError(AccessKeyError):
    """Raised when a value does not fit its fixed-width wire field."""


class InvalidKeyError(AccessKeyError):
    """Raised when signing key material or app credentials are missing."""
