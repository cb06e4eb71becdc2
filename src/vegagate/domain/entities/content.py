"""Content shapes exchanged between provider plugins and the web client.

These are typing aids for provider authors. The gateway passes provider
results through verbatim and never validates them against these shapes.
Keys keep the camelCase spelling the web client reads.
"""

# Annotations stay eager so NotRequired marks keys optional at class creation.
from typing import Literal, NotRequired, TypedDict

ContentType = Literal["movie", "series"]
StreamType = Literal["mp4", "m3u8", "application/x-mpegURL", "other"]


class CatalogEntry(TypedDict):
    """A named content feed; ``filter`` is handed back to ``get_posts``."""

    title: str
    filter: str


class GenreEntry(TypedDict):
    title: str
    filter: str


class Catalog(TypedDict):
    catalog: list[CatalogEntry]
    genres: list[GenreEntry]


class Post(TypedDict):
    """One browsable content card."""

    title: str
    link: str
    image: str


class DirectLink(TypedDict):
    title: str
    link: str
    type: str


class LinkGroup(TypedDict):
    """A quality/season group on a details page.

    Carries either ``directLinks`` or a lazy ``episodesLink``. Providers keep
    the two apart by convention; nothing here enforces it.
    """

    title: str
    quality: NotRequired[int]
    directLinks: NotRequired[list[DirectLink]]
    episodesLink: NotRequired[str]


class MetaDetails(TypedDict):
    title: str
    image: str
    type: ContentType
    linkList: list[LinkGroup]
    synopsis: NotRequired[str]
    rating: NotRequired[str]
    imdbId: NotRequired[str]
    tags: NotRequired[list[str]]
    cast: NotRequired[list[str]]


class Episode(TypedDict):
    title: str
    link: str


class StreamOption(TypedDict):
    """One resolvable playback URL."""

    server: str
    link: str
    type: StreamType
    quality: NotRequired[int]
