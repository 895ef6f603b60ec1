"""GitHub endpoints for the upstream VulkanMemoryAllocator repository."""

from __future__ import annotations

import json
from urllib.parse import quote

from ..config import UpstreamConfig
from ..extract import ExtractionError
from .transport import HttpTransport


class UpstreamClient:
    """Resolves revisions and downloads files from the upstream repository."""

    def __init__(
        self,
        config: UpstreamConfig | None = None,
        *,
        transport: HttpTransport | None = None,
    ) -> None:
        self.config = config or UpstreamConfig()
        self.transport = transport or HttpTransport()

    def commits_url(self, revision: str) -> str:
        return (
            f"{self.config.api_url}/repos/{self.config.repository}/commits"
            f"?per_page=1&sha={quote(revision, safe='')}"
        )

    def raw_url(self, commit: str) -> str:
        return f"{self.config.raw_url}/{self.config.repository}/{commit}/{self.config.header_path}"

    def tree_url(self, commit: str) -> str:
        return f"{self.config.web_url}/{self.config.repository}/tree/{commit}"

    def resolve_commit(self, revision: str) -> str:
        """Return the commit hash the revision currently points at."""
        body = self.transport.get(
            self.commits_url(revision), error_message="Failed to get commit hash"
        )
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as exc:
            raise ExtractionError("Cannot extract commit hash") from exc

        if not isinstance(payload, list) or not payload:
            raise ExtractionError("Cannot extract commit hash")
        first = payload[0]
        sha = first.get("sha") if isinstance(first, dict) else None
        if not isinstance(sha, str) or not sha:
            raise ExtractionError("Cannot extract commit hash")
        return sha

    def download_header(self, commit: str) -> str:
        """Return the header contents at an exact commit."""
        filename = self.config.header_path.rsplit("/", 1)[-1]
        return self.transport.get(
            self.raw_url(commit), error_message=f"Failed to download {filename}"
        )


__all__ = ["UpstreamClient"]
