"""Configuration loading and parsing for globimport."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger("globimport")

CONFIG_FILENAMES = ["globimport.yml", "globimport.yaml", ".globimport.yml"]

VALID_ERROR_MODES = {"abort", "skip"}

DEFAULT_EXTENSIONS = [".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx"]


@dataclass
class GlobImportConfig:
    """Parsed globimport configuration."""
    root: str | None = None
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    on_error: str = "abort"

    @property
    def aborts_on_error(self) -> bool:
        return self.on_error == "abort"

    def handles(self, path: str) -> bool:
        return any(path.endswith(ext) for ext in self.extensions)


def load_config(project_dir: str) -> GlobImportConfig:
    """Load config from globimport.yml, falling back to defaults."""
    root = Path(project_dir)

    raw = {}
    for filename in CONFIG_FILENAMES:
        config_path = root / filename
        if config_path.exists():
            try:
                raw = yaml.safe_load(config_path.read_text()) or {}
            except yaml.YAMLError:
                logger.warning("Could not parse %s, using defaults", config_path)
                raw = {}
            break

    if not isinstance(raw, dict):
        logger.warning("Config must be a mapping, using defaults")
        raw = {}

    on_error = raw.get("on_error", "abort")
    if on_error not in VALID_ERROR_MODES:
        logger.warning("Invalid on_error '%s', falling back to 'abort'", on_error)
        on_error = "abort"

    # Relative roots are taken from the project directory.
    config_root = raw.get("root")
    if config_root is not None:
        config_root = str(root / config_root)
    else:
        config_root = str(root)

    extensions = raw.get("extensions") or list(DEFAULT_EXTENSIONS)
    if not isinstance(extensions, list) or not all(isinstance(ext, str) for ext in extensions):
        logger.warning("Invalid extensions %r, falling back to defaults", extensions)
        extensions = list(DEFAULT_EXTENSIONS)
    extensions = [ext if ext.startswith(".") else f".{ext}" for ext in extensions]

    return GlobImportConfig(
        root=config_root,
        extensions=extensions,
        on_error=on_error,
    )
