# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Fixed playback policy for universal audio stream URLs.

Hosts rely on these exact values; they are not configurable.
"""

from mediatree.models.enums import StreamProtocol

MAX_STREAMING_BITRATE = 140_000_000

# Tried in order; "a|b" means container a with audio codec b.
SUPPORTED_CONTAINERS: tuple[str, ...] = (
    "opus",
    "mp3|mp3",
    "aac",
    "m4a",
    "m4b|aac",
    "flac",
    "webma",
    "webm",
    "wav",
    "ogg",
)

TRANSCODING_PROTOCOL = StreamProtocol.HLS
TRANSCODING_CONTAINER = "ts"
AUDIO_CODEC = "aac"
ENABLE_REMOTE_MEDIA = True


def universal_audio_query(device_id: str) -> dict[str, str]:
    """Build the query parameters of a universal audio stream request."""
    return {
        "deviceId": device_id,
        "maxStreamingBitrate": str(MAX_STREAMING_BITRATE),
        "container": ",".join(SUPPORTED_CONTAINERS),
        "transcodingProtocol": str(TRANSCODING_PROTOCOL),
        "transcodingContainer": TRANSCODING_CONTAINER,
        "audioCodec": AUDIO_CODEC,
        "enableRemoteMedia": str(ENABLE_REMOTE_MEDIA).lower(),
    }
