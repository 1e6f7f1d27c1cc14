import pytest

from agora_access_key.errors import UnknownPrivilegeError
from agora_access_key.privilege import Privilege, privilege_code, privileges, wire_name, wire_privileges


def test_privilege_codes_match_wire_table() -> None:
    assert dict(privileges()) == {
        "join_channel": 1,
        "publish_audio": 2,
        "publish_video": 3,
        "publish_data": 4,
        "publish_audio_cdn": 5,
        "publish_video_cdn": 6,
        "request_publish_audio": 7,
        "request_publish_video": 8,
        "request_publish_data": 9,
        "invite_publish_audio": 10,
        "invite_publish_video": 11,
        "invite_publish_data": 12,
        "administrate_channel": 101,
        "rtm_login": 1000,
    }


def test_every_privilege_has_a_unique_code() -> None:
    codes = [privilege_code(p) for p in Privilege]
    assert len(codes) == len(set(codes)) == len(Privilege)


def test_lookup_accepts_names_and_members() -> None:
    assert privilege_code("join_channel") == 1
    assert privilege_code(Privilege.PUBLISH_VIDEO) == 3
    assert privilege_code(Privilege.RTM_LOGIN) == 1000


def test_unknown_privilege_fails_fast() -> None:
    with pytest.raises(UnknownPrivilegeError):
        privilege_code("publish_smell")
    with pytest.raises(ValueError):
        privilege_code("kJoinChannel")


def test_wire_names() -> None:
    assert wire_name(Privilege.JOIN_CHANNEL) == "kJoinChannel"
    assert wire_name("administrate_channel") == "kAdministrateChannel"
    assert wire_privileges()["kRtmLogin"] == 1000
    assert len(wire_privileges()) == len(Privilege)


def test_mappings_are_read_only() -> None:
    with pytest.raises(TypeError):
        privileges()["join_channel"] = 99  # type: ignore[index]
