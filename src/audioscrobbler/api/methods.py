"""Where: src/audioscrobbler/api/methods.py
What: Static table of Last.fm 2.0 methods exposed by the client.
Why: Bindings are generated from this data; adding a method means adding a row.
"""

from __future__ import annotations

from typing import Final

from .registry import AuthMode, MethodDescriptor, MethodRegistry

_PAGING: Final[tuple[tuple[str, str | None], ...]] = (("limit", None), ("page", None))

METHODS: Final[tuple[MethodDescriptor, ...]] = (
    # album -------------------------------------------------------------------
    MethodDescriptor(
        "album",
        "addTags",
        AuthMode.REQUIRED,
        required=("artist", "album", "tags"),
    ),
    MethodDescriptor(
        "album",
        "getInfo",
        required=("artist", "album"),
        optional=(("mbid", None), ("autocorrect", "0"), ("username", None), ("lang", None)),
        selectors=("lfm > album > name", "lfm > album > artist", "lfm > album > url"),
    ),
    MethodDescriptor(
        "album",
        "getTopTags",
        required=("artist", "album"),
        optional=(("mbid", None), ("autocorrect", "0")),
        selectors=("toptags > tag > name", "toptags > tag > count"),
    ),
    MethodDescriptor(
        "album",
        "removeTag",
        AuthMode.REQUIRED,
        required=("artist", "album", "tag"),
    ),
    MethodDescriptor(
        "album",
        "search",
        required=("album",),
        optional=_PAGING,
        selectors=("albummatches > album > name", "albummatches > album > artist"),
    ),
    # artist ------------------------------------------------------------------
    MethodDescriptor(
        "artist",
        "addTags",
        AuthMode.REQUIRED,
        required=("artist", "tags"),
    ),
    MethodDescriptor(
        "artist",
        "getInfo",
        required=("artist",),
        optional=(("mbid", None), ("autocorrect", "0"), ("username", None), ("lang", None)),
        selectors=("lfm > artist > name", "lfm > artist > url", "lfm > artist > stats > listeners"),
    ),
    MethodDescriptor(
        "artist",
        "getSimilar",
        required=("artist",),
        optional=(("limit", None), ("mbid", None), ("autocorrect", "0")),
        selectors=("similarartists > artist > name", "similarartists > artist > match"),
    ),
    MethodDescriptor(
        "artist",
        "getTopAlbums",
        required=("artist",),
        optional=(("mbid", None), ("autocorrect", "0"), *_PAGING),
        selectors=("topalbums > album > name", "topalbums > album > playcount"),
    ),
    MethodDescriptor(
        "artist",
        "getTopTags",
        required=("artist",),
        optional=(("mbid", None), ("autocorrect", "0")),
        selectors=("toptags > tag > name",),
    ),
    MethodDescriptor(
        "artist",
        "getTopTracks",
        required=("artist",),
        optional=(("mbid", None), ("autocorrect", "0"), *_PAGING),
        selectors=("toptracks > track > name", "toptracks > track > playcount"),
    ),
    MethodDescriptor(
        "artist",
        "removeTag",
        AuthMode.REQUIRED,
        required=("artist", "tag"),
    ),
    MethodDescriptor(
        "artist",
        "search",
        required=("artist",),
        optional=_PAGING,
        selectors=("artistmatches > artist > name", "artistmatches > artist > listeners"),
    ),
    # auth --------------------------------------------------------------------
    MethodDescriptor(
        "auth",
        "getSession",
        AuthMode.SESSION_BOOTSTRAP,
        required=("token",),
        selectors=("session > name", "session > key"),
    ),
    MethodDescriptor(
        "auth",
        "getToken",
        AuthMode.SESSION_BOOTSTRAP,
        selectors=("token",),
    ),
    # chart -------------------------------------------------------------------
    MethodDescriptor(
        "chart",
        "getTopArtists",
        optional=_PAGING,
        selectors=("artists > artist > name", "artists > artist > playcount"),
    ),
    MethodDescriptor(
        "chart",
        "getTopTags",
        optional=_PAGING,
        selectors=("tags > tag > name",),
    ),
    MethodDescriptor(
        "chart",
        "getTopTracks",
        optional=_PAGING,
        selectors=("tracks > track > name", "tracks > track > artist > name"),
    ),
    # geo ---------------------------------------------------------------------
    MethodDescriptor(
        "geo",
        "getTopArtists",
        required=("country",),
        optional=_PAGING,
        selectors=("topartists > artist > name", "topartists > artist > listeners"),
    ),
    MethodDescriptor(
        "geo",
        "getTopTracks",
        required=("country",),
        optional=(("location", None), *_PAGING),
        selectors=("tracks > track > name", "tracks > track > artist > name"),
    ),
    # library -----------------------------------------------------------------
    MethodDescriptor(
        "library",
        "getArtists",
        required=("user",),
        optional=_PAGING,
        selectors=("artists > artist > name", "artists > artist > playcount"),
    ),
    # tag ---------------------------------------------------------------------
    MethodDescriptor(
        "tag",
        "getInfo",
        required=("tag",),
        optional=(("lang", None),),
        selectors=("lfm > tag > name", "lfm > tag > total", "lfm > tag > reach"),
    ),
    MethodDescriptor(
        "tag",
        "getSimilar",
        required=("tag",),
        selectors=("similartags > tag > name",),
    ),
    MethodDescriptor(
        "tag",
        "getTopAlbums",
        required=("tag",),
        optional=_PAGING,
        selectors=("albums > album > name", "albums > album > artist > name"),
    ),
    MethodDescriptor(
        "tag",
        "getTopArtists",
        required=("tag",),
        optional=_PAGING,
        selectors=("topartists > artist > name",),
    ),
    MethodDescriptor(
        "tag",
        "getTopTags",
        selectors=("toptags > tag > name", "toptags > tag > count"),
    ),
    MethodDescriptor(
        "tag",
        "getTopTracks",
        required=("tag",),
        optional=_PAGING,
        selectors=("tracks > track > name", "tracks > track > artist > name"),
    ),
    # track -------------------------------------------------------------------
    MethodDescriptor(
        "track",
        "addTags",
        AuthMode.REQUIRED,
        required=("artist", "track", "tags"),
    ),
    MethodDescriptor(
        "track",
        "getInfo",
        required=("artist", "track"),
        optional=(("mbid", None), ("username", None), ("autocorrect", "0")),
        selectors=("lfm > track > name", "lfm > track > artist > name", "lfm > track > duration"),
    ),
    MethodDescriptor(
        "track",
        "getSimilar",
        required=("artist", "track"),
        optional=(("mbid", None), ("autocorrect", "0"), ("limit", None)),
        selectors=("similartracks > track > name", "similartracks > track > artist > name"),
    ),
    MethodDescriptor(
        "track",
        "getTopTags",
        required=("artist", "track"),
        optional=(("mbid", None), ("autocorrect", "0")),
        selectors=("toptags > tag > name", "toptags > tag > count"),
    ),
    MethodDescriptor(
        "track",
        "love",
        AuthMode.REQUIRED,
        required=("track", "artist"),
    ),
    MethodDescriptor(
        "track",
        "removeTag",
        AuthMode.REQUIRED,
        required=("artist", "track", "tag"),
    ),
    MethodDescriptor(
        "track",
        "scrobble",
        AuthMode.REQUIRED,
        required=("artist", "track", "timestamp"),
        optional=(
            ("album", None),
            ("albumArtist", None),
            ("trackNumber", None),
            ("duration", None),
            ("mbid", None),
            ("chosenByUser", None),
        ),
        selectors=("scrobbles > scrobble > artist", "scrobbles > scrobble > track"),
    ),
    MethodDescriptor(
        "track",
        "search",
        required=("track",),
        optional=(("artist", None), *_PAGING),
        selectors=("trackmatches > track > name", "trackmatches > track > artist"),
    ),
    MethodDescriptor(
        "track",
        "unlove",
        AuthMode.REQUIRED,
        required=("track", "artist"),
    ),
    MethodDescriptor(
        "track",
        "updateNowPlaying",
        AuthMode.REQUIRED,
        required=("artist", "track"),
        optional=(
            ("album", None),
            ("albumArtist", None),
            ("trackNumber", None),
            ("duration", None),
            ("mbid", None),
        ),
        selectors=("nowplaying > artist", "nowplaying > track"),
    ),
    # user --------------------------------------------------------------------
    MethodDescriptor(
        "user",
        "getFriends",
        required=("user",),
        optional=(("recenttracks", None), *_PAGING),
        selectors=("friends > user > name",),
    ),
    MethodDescriptor(
        "user",
        "getInfo",
        optional=(("user", None),),
        selectors=("lfm > user > name", "lfm > user > playcount", "lfm > user > country"),
    ),
    MethodDescriptor(
        "user",
        "getLovedTracks",
        required=("user",),
        optional=_PAGING,
        selectors=("lovedtracks > track > name", "lovedtracks > track > artist > name"),
    ),
    MethodDescriptor(
        "user",
        "getRecentTracks",
        required=("user",),
        optional=(*_PAGING, ("from", None), ("to", None), ("extended", None)),
        selectors=(
            "recenttracks > track > artist",
            "recenttracks > track > name",
            "recenttracks > track > album",
        ),
    ),
    MethodDescriptor(
        "user",
        "getTopAlbums",
        required=("user",),
        optional=(("period", None), *_PAGING),
        selectors=("topalbums > album > name", "topalbums > album > artist > name"),
    ),
    MethodDescriptor(
        "user",
        "getTopArtists",
        required=("user",),
        optional=(("period", None), *_PAGING),
        selectors=("topartists > artist > name", "topartists > artist > playcount"),
    ),
    MethodDescriptor(
        "user",
        "getTopTags",
        required=("user",),
        optional=(("limit", None),),
        selectors=("toptags > tag > name", "toptags > tag > count"),
    ),
    MethodDescriptor(
        "user",
        "getTopTracks",
        required=("user",),
        optional=(("period", None), *_PAGING),
        selectors=("toptracks > track > name", "toptracks > track > artist > name"),
    ),
)

DEFAULT_REGISTRY: Final[MethodRegistry] = MethodRegistry(METHODS)


__all__ = ["DEFAULT_REGISTRY", "METHODS"]
