"""Core data models shared across vmasync components."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class VersionInfo:
    """Version metadata read from the upstream header."""

    library_version: str
    protocol_version: Tuple[int, int]

    @property
    def protocol(self) -> str:
        major, minor = self.protocol_version
        return f"{major}.{minor}"


@dataclass
class SyncOutcome:
    """Result of a header synchronisation run."""

    revision: str
    commit: str
    version: VersionInfo
    header_path: Path
    readme_path: Path
    exit_code: Optional[int] = None
