"""Markdown rewriting for documents mirrored into the docs site."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from pathlib import PurePosixPath
from typing import Callable

import yaml

FRONT_MATTER_DELIMITER = "---"
SYNC_MARKER = "<!-- docsteward:synced -->"


class MalformedFrontMatterError(ValueError):
    """Raised when a document opens a front-matter block that never closes."""


@dataclass(frozen=True)
class SyncNotice:
    """Admonition telling readers where a mirrored page comes from."""

    upstream_name: str
    upstream_url: str

    def render(self, day: date) -> str:
        return (
            f"{SYNC_MARKER}\n"
            ":::info\n"
            f"This documentation is automatically synchronized from the [{self.upstream_name}]({self.upstream_url}). \n"
            f"Last updated: {day.isoformat()}\n"
            ":::\n"
            "\n"
        )


class ContentTransformer:
    """Rewrites upstream markdown so it renders from its docs-site location.

    Links into the upstream ``docs/`` folder are flattened one level, a
    front-matter block is synthesized when missing, and a sync notice is
    inserted right after the front matter. The notice opens with
    ``SYNC_MARKER``; text whose front matter is already followed by it is
    returned unchanged. A marker anywhere else does not count.
    """

    _LINK_REWRITES = (
        ("](./docs/", "](../"),
        ("](../docs/", "](../"),
    )
    _H1_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)

    def __init__(self, notice: SyncNotice, *, today: Callable[[], date] = date.today) -> None:
        self.notice = notice
        self._today = today

    def transform(self, markdown: str, source_path: str) -> str:
        if self.is_transformed(markdown):
            return markdown

        processed = self.rewrite_links(markdown)
        if not processed.startswith(FRONT_MATTER_DELIMITER):
            processed = self.build_front_matter(self.extract_title(processed, source_path)) + processed

        # Known limitation: a stray delimiter inside the opening block is taken as its end.
        closing = processed.find(FRONT_MATTER_DELIMITER, len(FRONT_MATTER_DELIMITER))
        if closing == -1:
            raise MalformedFrontMatterError(f"{source_path}: front matter is never closed")
        insert_at = closing + len(FRONT_MATTER_DELIMITER)
        notice = self.notice.render(self._today())
        return f"{processed[:insert_at]}\n\n{notice}{processed[insert_at:]}"

    @staticmethod
    def is_transformed(markdown: str) -> bool:
        if not markdown.startswith(FRONT_MATTER_DELIMITER):
            return False
        closing = markdown.find(FRONT_MATTER_DELIMITER, len(FRONT_MATTER_DELIMITER))
        if closing == -1:
            return False
        after = markdown[closing + len(FRONT_MATTER_DELIMITER) :]
        return after.lstrip("\n").startswith(SYNC_MARKER)

    @classmethod
    def rewrite_links(cls, markdown: str) -> str:
        for old, new in cls._LINK_REWRITES:
            markdown = markdown.replace(old, new)
        return markdown

    @classmethod
    def extract_title(cls, markdown: str, source_path: str) -> str:
        """Return the first level-1 heading, or a title derived from the filename."""
        match = cls._H1_PATTERN.search(markdown)
        if match:
            return match.group(1).strip()
        stem = PurePosixPath(source_path.replace("\\", "/")).name
        if stem.endswith(".md"):
            stem = stem[: -len(".md")]
        return " ".join(word[:1].upper() + word[1:] for word in stem.split("-"))

    @staticmethod
    def build_front_matter(title: str) -> str:
        body = yaml.safe_dump(
            {"title": title},
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=10_000,
        )
        return f"{FRONT_MATTER_DELIMITER}\n{body}{FRONT_MATTER_DELIMITER}\n\n"


__all__ = [
    "ContentTransformer",
    "FRONT_MATTER_DELIMITER",
    "MalformedFrontMatterError",
    "SYNC_MARKER",
    "SyncNotice",
]
