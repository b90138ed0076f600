"""
Villain Configuration

Pydantic model for runtime settings plus the loader that reads them from
the ``[tool.evil]`` table of a pyproject.toml.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from evil.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_LISTING_PATH = "tmp/listings.csv"

# Environment overrides (applied after the pyproject table)
ENV_LISTING_PATH = "EVIL_LISTING_PATH"


class EvilConfig(BaseModel):
    """Settings shared by the villain and his collaborators."""

    listing_path: str = DEFAULT_LISTING_PATH
    plan_delay_seconds: float = Field(default=0.1, ge=0, le=10)
    log_dir: str = ".evil_logs"


def load_config_from_pyproject(repo_root: Path) -> EvilConfig:
    """Load configuration from pyproject.toml.

    Args:
        repo_root: Path to repository root

    Returns:
        EvilConfig (defaults if the file or the table is missing)

    Raises:
        ConfigError: If the table exists but holds invalid values
    """
    pyproject_path = repo_root / "pyproject.toml"

    if not pyproject_path.exists():
        return EvilConfig()

    with open(pyproject_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Could not parse {pyproject_path}: {e}") from e

    tool_config = data.get("tool", {}).get("evil", {})
    if not tool_config:
        return EvilConfig()

    try:
        return EvilConfig(**tool_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid [tool.evil] settings: {e}") from e


def load_config(repo_root: str | Path | None = None) -> EvilConfig:
    """Load configuration, then apply environment overrides.

    Priority:
    1. EVIL_LISTING_PATH environment variable
    2. [tool.evil] in pyproject.toml under repo_root (default: cwd)
    3. Built-in defaults
    """
    if repo_root is None:
        repo_root = Path.cwd()
    config = load_config_from_pyproject(Path(repo_root).resolve())

    listing_path = os.environ.get(ENV_LISTING_PATH)
    if listing_path:
        logger.debug(f"Listing path overridden by {ENV_LISTING_PATH}: {listing_path}")
        config = config.model_copy(update={"listing_path": listing_path})

    return config
