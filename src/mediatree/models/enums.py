# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Enums for catalog item kinds, collection types, and query options."""

from enum import StrEnum


class ItemKind(StrEnum):
    """Catalog record kinds used when filtering item queries."""

    AUDIO = "Audio"
    MUSIC_ALBUM = "MusicAlbum"
    MUSIC_ARTIST = "MusicArtist"
    MUSIC_GENRE = "MusicGenre"
    PLAYLIST = "Playlist"
    COLLECTION_FOLDER = "CollectionFolder"
    USER_VIEW = "UserView"


class CollectionType(StrEnum):
    """Top-level collection (library) types."""

    MUSIC = "music"
    MOVIES = "movies"
    TVSHOWS = "tvshows"
    BOOKS = "books"
    HOMEVIDEOS = "homevideos"
    MUSICVIDEOS = "musicvideos"
    PLAYLISTS = "playlists"
    BOXSETS = "boxsets"
    LIVETV = "livetv"
    UNKNOWN = "unknown"


class ImageType(StrEnum):
    """Image types exposed by the catalog image endpoint."""

    PRIMARY = "Primary"
    BACKDROP = "Backdrop"
    THUMB = "Thumb"


class ItemSortBy(StrEnum):
    """Sort keys for item queries."""

    SORT_NAME = "SortName"
    DATE_CREATED = "DateCreated"
    DATE_PLAYED = "DatePlayed"


class StreamProtocol(StrEnum):
    """Transcoding protocols for stream URLs."""

    HTTP = "http"
    HLS = "hls"
