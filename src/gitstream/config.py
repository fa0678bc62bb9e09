"""gitstream configuration.

All settings support environment variable overrides with GITSTREAM_ prefix.
For example, GITSTREAM_LOG_LEVEL=DEBUG sets log_level to DEBUG.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitstreamSettings(BaseSettings):
    """Configuration for a gitstream run."""

    model_config = SettingsConfigDict(env_prefix="GITSTREAM_")

    repo: str = Field(
        default="",
        description=(
            "Repository label copied verbatim into every record "
            '(e.g., "org/name"). The --repo CLI option overrides it.'
        ),
    )

    encoding: str = Field(
        default="utf-8",
        description=(
            "Encoding of the git log input. Undecodable bytes are carried "
            "through and the affected records dropped at emission."
        ),
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )

    log_format: str = Field(
        default="json",
        description=(
            'Logging format: "json" for structured logs, '
            '"console" for human-readable'
        ),
    )


# Module-level singleton
settings = GitstreamSettings()
