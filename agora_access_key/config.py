"""Configuration for access key issuance."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import InvalidKeyError

DEFAULT_TTL_SECONDS = 24 * 3600


@dataclass
class AccessKeyConfig:
    """App credentials and default token lifetime."""

    app_id: str = ""
    app_certificate: str = ""
    ttl_seconds: int = DEFAULT_TTL_SECONDS

    @classmethod
    def from_env(cls) -> "AccessKeyConfig":
        """Read ``AGORA_APP_ID``, ``AGORA_APP_CERTIFICATE`` and ``AGORA_TOKEN_TTL_SECONDS``."""
        return cls(
            app_id=os.getenv("AGORA_APP_ID", ""),
            app_certificate=os.getenv("AGORA_APP_CERTIFICATE", ""),
            ttl_seconds=int(os.getenv("AGORA_TOKEN_TTL_SECONDS", str(DEFAULT_TTL_SECONDS))),
        )

    def validate(self) -> None:
        if not self.app_id:
            raise InvalidKeyError("`app_id` must be configured (set AGORA_APP_ID).")
        if not self.app_certificate:
            raise InvalidKeyError("`app_certificate` must be configured (set AGORA_APP_CERTIFICATE).")
        if self.ttl_seconds <= 0:
            raise ValueError(f"`ttl_seconds` must be positive, got {self.ttl_seconds}.")
