"""Configuration loading for vmasync (.vmasync.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".vmasync.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class UpstreamConfig:
    """Where the vendored header comes from."""

    repository: str = "GPUOpen-LibrariesAndSDKs/VulkanMemoryAllocator"
    header_path: str = "include/vk_mem_alloc.h"
    api_url: str = "https://api.github.com"
    raw_url: str = "https://raw.githubusercontent.com"
    web_url: str = "https://github.com"


@dataclass
class PathsConfig:
    """Local files rewritten by a sync run, relative to the project root."""

    header: str = "include/vk_mem_alloc.h"
    readme: str = "README.md"


@dataclass
class GeneratorConfig:
    """External bindings generator invocation."""

    command: List[str] = field(default_factory=lambda: ["java", "Generate.java"])


@dataclass
class VmaSyncConfig:
    """Represents the settings defined in .vmasync.yml."""

    root: Path
    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    @property
    def header_file(self) -> Path:
        return self.root / self.paths.header

    @property
    def readme_file(self) -> Path:
        return self.root / self.paths.readme


def load_config(config_path: Path) -> VmaSyncConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return VmaSyncConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    upstream = UpstreamConfig()
    upstream_data = _as_dict(data.get("upstream"))
    upstream.repository = _as_str(upstream_data.get("repository")) or upstream.repository
    upstream.header_path = _as_str(upstream_data.get("header_path")) or upstream.header_path
    upstream.api_url = _as_url(upstream_data.get("api_url")) or upstream.api_url
    upstream.raw_url = _as_url(upstream_data.get("raw_url")) or upstream.raw_url
    upstream.web_url = _as_url(upstream_data.get("web_url")) or upstream.web_url

    paths = PathsConfig()
    paths_data = _as_dict(data.get("paths"))
    paths.header = _as_str(paths_data.get("header")) or paths.header
    paths.readme = _as_str(paths_data.get("readme")) or paths.readme

    generator = GeneratorConfig()
    generator_data = _as_dict(data.get("generator"))
    command = _as_command(generator_data.get("command"))
    if command:
        generator.command = command

    return VmaSyncConfig(root=root, upstream=upstream, paths=paths, generator=generator)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None


def _as_url(value: Any) -> Optional[str]:
    url = _as_str(value)
    return url.rstrip("/") if url else None


def _as_command(value: Any) -> List[str]:
    # A plain string is split on whitespace; lists are taken element-wise.
    if isinstance(value, str):
        return value.split()
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "GeneratorConfig",
    "PathsConfig",
    "UpstreamConfig",
    "VmaSyncConfig",
    "load_config",
]
