"""Pipeline orchestration for the header sync flow."""

from __future__ import annotations

from pathlib import Path

from .config import ConfigError, VmaSyncConfig, load_config
from .extract import extract_version_info
from .generator import GeneratorRunner
from .logging import get_logger
from .models import SyncOutcome
from .postproc.markers import MarkerManager
from .upstream.client import UpstreamClient

DEFAULT_REVISION = "master"


class Orchestrator:
    """Coordinates resolve, fetch, extract, persist, patch and generate steps.

    Only this class touches the filesystem. Every step either completes or
    raises; nothing already written is rolled back.
    """

    def __init__(
        self,
        root: Path | str = ".",
        *,
        config: VmaSyncConfig | None = None,
        client: UpstreamClient | None = None,
        marker_manager: MarkerManager | None = None,
        generator: GeneratorRunner | None = None,
    ) -> None:
        if config is None:
            project_root = Path(root).expanduser().resolve()
            if not project_root.is_dir():
                raise ConfigError(f"Project root {project_root} is not a directory")
            config = load_config(project_root)
        self.config = config
        self.client = client or UpstreamClient(self.config.upstream)
        self.marker_manager = marker_manager or MarkerManager()
        self.generator = generator or GeneratorRunner(self.config.generator.command)
        self.logger = get_logger("orchestrator")

    def run_update(self, revision: str = DEFAULT_REVISION, *, generate: bool = True) -> SyncOutcome:
        """Sync the vendored header to ``revision`` and regenerate bindings."""
        self.logger.info("Updating VMA revision... %s", revision)

        commit = self.client.resolve_commit(revision)
        self.logger.info("Commit hash: %s", commit)

        content = self.client.download_header(commit)
        version = extract_version_info(content)
        self.logger.info("VMA version: %s", version.library_version)
        self.logger.info("Vulkan version: %s", version.protocol)

        header_path = self.config.header_file
        self._write_header(header_path, content)

        readme_path = self.config.readme_file
        self._update_readme(
            readme_path,
            {
                "VER": version.library_version,
                "VK": version.protocol,
                "REV": f"[{commit}]({self.client.tree_url(commit)}) ",
            },
        )

        outcome = SyncOutcome(
            revision=revision,
            commit=commit,
            version=version,
            header_path=header_path,
            readme_path=readme_path,
        )
        if not generate:
            self.logger.info("Skipping C++ bindings generation")
            return outcome

        self.logger.info("Generating C++ bindings...")
        outcome.exit_code = self.generator.run(self.config.root)
        if outcome.exit_code != 0:
            self.logger.debug("Generator exited with code %d", outcome.exit_code)
        return outcome

    def _write_header(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps upstream line endings byte-for-byte.
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        self.logger.debug("Wrote %d characters to %s", len(content), path)

    def _update_readme(self, path: Path, substitutions: dict[str, str]) -> None:
        with path.open("r", encoding="utf-8", newline="") as handle:
            original = handle.read()
        previous = self.marker_manager.extract(original)
        updated = self.marker_manager.apply(original, substitutions)
        for key, value in substitutions.items():
            if key not in previous:
                self.logger.debug("No <!--%s--> region in %s", key, path.name)
            elif previous[key] != value:
                self.logger.debug("%s: %r -> %r", key, previous[key], value)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(updated)


__all__ = ["DEFAULT_REVISION", "Orchestrator"]
