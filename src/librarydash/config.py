"""Configuration management for librarydash.

Reads configuration from LIBRARYDASH_* environment variables, falling back
to defaults suitable for a local development server.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional


QUICK_STATS_SOURCES = ("placeholder", "api")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DashboardConfig:
    """Application configuration."""

    api_url: str = "http://localhost:8000/api"
    timeout: float = 10.0
    editor_label: str = "Admin"
    quick_stats_source: str = "placeholder"
    quick_stats_path: str = "/dashboard/today"
    log_level: str = "WARNING"

    def __post_init__(self):
        if not self.api_url:
            raise ValueError("API URL must not be empty")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")
        if not self.editor_label.strip():
            raise ValueError("Editor label must not be blank")
        if self.quick_stats_source not in QUICK_STATS_SOURCES:
            raise ValueError(
                f"Unknown quick stats source '{self.quick_stats_source}' "
                f"(expected one of: {', '.join(QUICK_STATS_SOURCES)})"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DashboardConfig":
        """Create a config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (for testing)

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        timeout_str = env.get("LIBRARYDASH_TIMEOUT")
        try:
            timeout = float(timeout_str) if timeout_str else defaults.timeout
        except ValueError as e:
            raise ValueError(f"Invalid LIBRARYDASH_TIMEOUT: {timeout_str!r}") from e

        return cls(
            api_url=env.get("LIBRARYDASH_API_URL") or defaults.api_url,
            timeout=timeout,
            editor_label=env.get("LIBRARYDASH_EDITOR_LABEL") or defaults.editor_label,
            quick_stats_source=(
                env.get("LIBRARYDASH_QUICK_STATS") or defaults.quick_stats_source
            ).lower(),
            quick_stats_path=env.get("LIBRARYDASH_QUICK_STATS_PATH") or defaults.quick_stats_path,
            log_level=(env.get("LIBRARYDASH_LOG_LEVEL") or defaults.log_level).upper(),
        )

    def override(self, **changes) -> "DashboardConfig":
        """Return a copy with non-None values replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
