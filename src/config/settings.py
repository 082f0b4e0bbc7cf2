"""
Environment-specific configuration settings.

Defaults suit local runs and tests; production trims log verbosity.
"""

from dataclasses import dataclass
import os

from models.interaction import DEFAULT_TIMESTAMP_FORMAT


@dataclass
class Settings:
    """Application settings with development defaults."""

    # Environment
    environment: str = "dev"

    # Logging
    log_level: str = "INFO"

    # Rendering of interaction timestamps in describe() lines
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        default_level = "WARNING" if env == "prod" else "INFO"
        return cls(
            environment=env,
            log_level=os.environ.get("LOG_LEVEL", default_level).upper(),
            timestamp_format=os.environ.get(
                "CRM_TIMESTAMP_FORMAT", DEFAULT_TIMESTAMP_FORMAT
            ),
        )
