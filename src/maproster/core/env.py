"""
Project-root and `.env` handling.

`data/locations.json` and `.env` are repo-relative, but the CLI, uvicorn and pytest
all start from different directories. Root lookup order:
`MAPROSTER_PROJECT_ROOT`, the directory of `MAPROSTER_ENV_FILE`, then the first
ancestor of the working directory that carries `.env`, `.git` or `src/` + `data/`.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

_ROOT_MARKERS = (".env", ".git")


def _explicit_env_file() -> Path | None:
    value = os.getenv("MAPROSTER_ENV_FILE")
    return Path(value).expanduser().resolve() if value else None


def _is_root(path: Path) -> bool:
    if any((path / marker).exists() for marker in _ROOT_MARKERS):
        return True
    return (path / "src").is_dir() and (path / "data").is_dir()


@lru_cache
def get_project_root() -> Path:
    """Return the project root directory (cached)."""
    override = os.getenv("MAPROSTER_PROJECT_ROOT")
    if override:
        return Path(override).expanduser().resolve()

    env_file = _explicit_env_file()
    if env_file is not None:
        return env_file.parent

    cwd = Path.cwd().resolve()
    return next((p for p in (cwd, *cwd.parents) if _is_root(p)), cwd)


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load the env file once, never overriding variables already set; returns its path."""
    env_path = _explicit_env_file() or get_project_root() / ".env"
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a possibly-relative path against the project root."""
    p = Path(path).expanduser()
    return p if p.is_absolute() else (get_project_root() / p).resolve()
