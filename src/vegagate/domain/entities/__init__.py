from .content import (
    Catalog,
    CatalogEntry,
    ContentType,
    DirectLink,
    Episode,
    GenreEntry,
    LinkGroup,
    MetaDetails,
    Post,
    StreamOption,
    StreamType,
)
from .provider import ProviderDescriptor

__all__ = [
    "Catalog",
    "CatalogEntry",
    "ContentType",
    "DirectLink",
    "Episode",
    "GenreEntry",
    "LinkGroup",
    "MetaDetails",
    "Post",
    "ProviderDescriptor",
    "StreamOption",
    "StreamType",
]
