"""News articles."""

from __future__ import annotations

from wynn_api.decoding.fields import StringInt

from .base import ApiModel


class NewsArticle(ApiModel):
    title: str
    date: str
    forum_thread: str
    author: str
    content: str
    comments: StringInt
