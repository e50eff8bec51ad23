"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    task_root: Path = Field(
        default=Path(".tasks"),
        description="Directory holding the local task store",
    )

    remote_latency: float = Field(
        default=0.5,
        ge=0,
        description="Simulated remote round-trip time in seconds",
    )

    seed_remote: bool = Field(
        default=True,
        description="Start the simulated remote with sample tasks",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TODOAPP_",
    }
