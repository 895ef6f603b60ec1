"""Managed marker utilities for README regions."""

from __future__ import annotations

import re
from typing import Dict, Mapping


class MarkerManager:
    """Applies ``<!--KEY-->...<!--/KEY-->`` markers for idempotent replacement."""

    BEGIN_FMT = "<!--{key}-->"
    END_FMT = "<!--/{key}-->"

    _REGION = re.compile(r"<!--(?P<key>[^/>\s][^>\s]*?)-->(?P<body>.*?)<!--/(?P=key)-->", re.DOTALL)

    def wrap(self, key: str, value: str) -> str:
        """Render ``value`` between the markers for ``key``."""
        return f"{self.BEGIN_FMT.format(key=key)}{value}{self.END_FMT.format(key=key)}"

    def replace(self, markdown: str, key: str, value: str) -> str:
        """Replace every region for ``key``; documents without it pass through."""
        begin = re.escape(self.BEGIN_FMT.format(key=key))
        end = re.escape(self.END_FMT.format(key=key))
        # The body may not contain another start marker for the same key, so a
        # dangling start marker never swallows the next complete region.
        pattern = re.compile(f"{begin}(?:(?!{begin}).)*?{end}", re.DOTALL)
        wrapped = self.wrap(key, value)
        return pattern.sub(lambda _match: wrapped, markdown)

    def apply(self, markdown: str, substitutions: Mapping[str, str]) -> str:
        """Apply each ``key -> value`` substitution in order."""
        for key, value in substitutions.items():
            markdown = self.replace(markdown, key, value)
        return markdown

    def extract(self, markdown: str) -> Dict[str, str]:
        """Return a mapping of region key to its current body (first occurrence)."""
        blocks: Dict[str, str] = {}
        for match in self._REGION.finditer(markdown):
            blocks.setdefault(match.group("key"), match.group("body"))
        return blocks


__all__ = ["MarkerManager"]
