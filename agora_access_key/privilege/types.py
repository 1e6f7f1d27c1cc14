"""Privilege enumeration."""

from __future__ import annotations

from enum import Enum


class Privilege(str, Enum):
    """Permission a token can grant on a channel."""

    JOIN_CHANNEL = "join_channel"
    PUBLISH_AUDIO = "publish_audio"
    PUBLISH_VIDEO = "publish_video"
    PUBLISH_DATA = "publish_data"
    PUBLISH_AUDIO_CDN = "publish_audio_cdn"
    PUBLISH_VIDEO_CDN = "publish_video_cdn"
    REQUEST_PUBLISH_AUDIO = "request_publish_audio"
    REQUEST_PUBLISH_VIDEO = "request_publish_video"
    REQUEST_PUBLISH_DATA = "request_publish_data"
    INVITE_PUBLISH_AUDIO = "invite_publish_audio"
    INVITE_PUBLISH_VIDEO = "invite_publish_video"
    INVITE_PUBLISH_DATA = "invite_publish_data"
    ADMINISTRATE_CHANNEL = "administrate_channel"
    RTM_LOGIN = "rtm_login"
