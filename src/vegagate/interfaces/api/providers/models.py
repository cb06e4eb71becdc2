"""Request bodies for the provider endpoints.

Every field is optional: a key the client leaves out reaches the provider
as ``None`` instead of failing validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class _Body(BaseModel):
    model_config = ConfigDict(extra="ignore")


class PostsRequest(_Body):
    filter: Any = None
    page: Any = 1


class SearchRequest(_Body):
    query: Any = None
    page: Any = 1


class MetaRequest(_Body):
    link: Any = None


class StreamRequest(_Body):
    link: Any = None
    type: Any = None


class EpisodesRequest(_Body):
    url: Any = None
