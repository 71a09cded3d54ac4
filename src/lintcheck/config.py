from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Tuple


class ConfigurationError(Exception):
    """Raised for missing run inputs or an unreadable analysis configuration."""


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


def _csv(value: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    check_name: str = _env("LINTCHECK_CHECK_NAME", "Lint Checks")
    # GitHub rejects check-run outputs carrying more than 50 annotations.
    batch_size: int = field(default_factory=lambda: int(os.getenv("LINTCHECK_BATCH_SIZE", "50")))
    files_per_page: int = field(
        default_factory=lambda: int(os.getenv("LINTCHECK_FILES_PER_PAGE", "100"))
    )
    warning_rules: Tuple[str, ...] = field(
        default_factory=lambda: _csv(os.getenv("LINTCHECK_WARNING_RULES", "W"))
    )
    http_timeout_s: float = field(
        default_factory=lambda: float(os.getenv("LINTCHECK_HTTP_TIMEOUT_S", "30"))
    )
    api_url: str = _env("GITHUB_API_URL", "https://api.github.com")
    workspace: Path = field(default_factory=lambda: Path(os.getenv("GITHUB_WORKSPACE", ".")))


def get_settings() -> Settings:
    """Read settings from the current environment (after any ``.env`` is loaded)."""
    return Settings()
