import struct

import pytest

from agora_access_key.errors import FieldOverflowError, UnknownPrivilegeError
from agora_access_key.privilege import Privilege
from agora_access_key.token.message import build_message
from agora_access_key.token.types import PrivilegeGrant


def test_single_grant_layout() -> None:
    message = build_message(1, 1_111_111, [("join_channel", 1_446_455_471)])
    assert message == struct.pack("<IIHHI", 1, 1_111_111, 1, 1, 1_446_455_471)
    assert len(message) == 16


def test_grants_keep_input_order_and_duplicates() -> None:
    grants = [
        PrivilegeGrant.of(Privilege.RTM_LOGIN, 20),
        ("join_channel", 10),
        ("join_channel", 30),
    ]
    message = build_message(7, 8, grants)
    assert len(message) == 10 + 6 * 3
    salt, ts, count = struct.unpack_from("<IIH", message)
    assert (salt, ts, count) == (7, 8, 3)
    body = [struct.unpack_from("<HI", message, 10 + 6 * i) for i in range(count)]
    assert body == [(1000, 20), (1, 10), (1, 30)]


def test_empty_grants() -> None:
    assert build_message(0, 0, []) == b"\x00" * 10


def test_unknown_privilege_propagates() -> None:
    with pytest.raises(UnknownPrivilegeError):
        build_message(1, 1, [("fly", 1)])


@pytest.mark.parametrize(
    "salt,ts,expires_at",
    [(2**32, 0, 0), (0, -1, 0), (0, 0, 2**32), (-5, 0, 0)],
)
def test_out_of_range_fields_are_rejected(salt: int, ts: int, expires_at: int) -> None:
    with pytest.raises(FieldOverflowError):
        build_message(salt, ts, [("join_channel", expires_at)])


def test_u32_boundaries_are_accepted() -> None:
    message = build_message(2**32 - 1, 2**32 - 1, [("publish_audio", 2**32 - 1)])
    assert message[:8] == b"\xff" * 8


def test_grant_count_overflow() -> None:
    grants = [("join_channel", 1)] * 65536
    with pytest.raises(FieldOverflowError):
        build_message(1, 1, grants)


@pytest.mark.parametrize("grant", ["join_channel", ("join_channel",), ("join_channel", 1, 2), 5])
def test_malformed_grant_is_rejected_with_clear_error(grant) -> None:
    with pytest.raises(TypeError, match="expires_at"):
        build_message(1, 1, [grant])
