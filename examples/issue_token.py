"""Example: issue an access key from environment configuration."""

from __future__ import annotations

import logging
import os

from agora_access_key import AccessKeyConfig, AccessKeyIssuer, Privilege
from agora_access_key.logging import setup_structured_logging


def main() -> None:
    setup_structured_logging(logging.DEBUG)

    config = AccessKeyConfig.from_env()
    issuer = AccessKeyIssuer(config)

    issued = issuer.issue(
        os.getenv("AGORA_CHANNEL", "test"),
        os.getenv("AGORA_UID", "12345asdf"),
        [Privilege.JOIN_CHANNEL, Privilege.PUBLISH_AUDIO, Privilege.PUBLISH_VIDEO],
    )
    print("Token:", issued.token)
    print("Expires at:", issued.expires_at)


if __name__ == "__main__":
    main()
