"""
Settings for reaching the match API, read from MATCHBROWSER_* environment variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

_ENV_LOADED = False


def _env_file_entries(path: Path) -> Dict[str, str]:
    entries: Dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        key = key.strip()
        if key:
            entries[key] = value.strip().strip('"').strip("'")
    return entries


def _ensure_env_loaded() -> None:
    """
    Merge .env files into os.environ, once per process.

    Reads MATCHBROWSER_ENV_FILE, then the working directory, then the
    project root; earlier files and the real environment take precedence.
    """
    global _ENV_LOADED  # noqa: PLW0603 - intentional module level state
    if _ENV_LOADED:
        return

    candidates = []
    explicit = os.getenv("MATCHBROWSER_ENV_FILE")
    if explicit:
        candidates.append(Path(explicit))
    cwd_env = Path.cwd() / ".env"
    candidates.append(cwd_env)
    repo_env = Path(__file__).resolve().parents[1] / ".env"
    if repo_env != cwd_env:
        candidates.append(repo_env)

    for path in candidates:
        if not path or not path.exists():
            continue
        try:
            entries = _env_file_entries(path)
        except (OSError, ValueError):
            continue
        for key, value in entries.items():
            os.environ.setdefault(key, value)

    _ENV_LOADED = True


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class APISettings:
    """
    Where the match API lives and how the client talks to it.
    """

    base_url: str
    api_token: Optional[str] = None
    timeout: int = 30
    max_retries: int = 0
    cache_dir: str = ".cache"
    # Seconds a cached seasons/tournaments/teams payload stays valid; None keeps it forever.
    reference_ttl: Optional[int] = 3600
    default_per_page: int = 10

    @classmethod
    def from_env(cls) -> "APISettings":
        """
        Build settings from MATCHBROWSER_* variables; integers are validated.
        """
        _ensure_env_loaded()
        return cls(
            base_url=os.getenv("MATCHBROWSER_API_URL", "http://127.0.0.1:3000"),
            api_token=os.getenv("MATCHBROWSER_API_TOKEN"),
            timeout=_int_env("MATCHBROWSER_TIMEOUT", 30),
            max_retries=_int_env("MATCHBROWSER_MAX_RETRIES", 0),
            cache_dir=os.getenv("MATCHBROWSER_CACHE_DIR", ".cache"),
            reference_ttl=_int_env("MATCHBROWSER_REFERENCE_TTL", 3600),
            default_per_page=_int_env("MATCHBROWSER_PER_PAGE", 10),
        )
