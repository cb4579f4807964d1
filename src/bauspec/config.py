"""YAML config loader: reads .bauspec.yml into BauspecConfig."""

from pathlib import Path

import yaml

from bauspec.schemas.config import BauspecConfig

CONFIG_FILENAME = ".bauspec.yml"


def load_config(path: str | Path) -> BauspecConfig:
    """Load and validate a config file.

    Raises ``FileNotFoundError`` if the path doesn't exist and
    ``pydantic.ValidationError`` if the YAML content is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text())
    if raw is None:
        return BauspecConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must be a YAML mapping, got {type(raw).__name__}")

    # An empty YAML key loads as None; fall back to the default instead.
    raw = {key: value for key, value in raw.items() if value is not None}

    return BauspecConfig(**raw)


def resolve_config(project_root: str | Path, path: str | Path | None = None) -> BauspecConfig:
    """Return the explicit config, else ``.bauspec.yml`` in the project, else defaults."""
    if path is not None:
        return load_config(path)
    candidate = Path(project_root) / CONFIG_FILENAME
    if candidate.exists():
        return load_config(candidate)
    return BauspecConfig()
