"""Block store config via env vars"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Block store root dir
    BLOCKSTORE_ROOT: str = "/data/blocks"

    # Characters of the CID string per directory level
    BLOCKSTORE_SHARD_WIDTH: int = Field(default=15, ge=1)

    # Re-address blocks on read and reject a CID mismatch
    BLOCKSTORE_VERIFY_ON_READ: bool = True

    LOG_LEVEL: str = "INFO"

    model_config = {"env_prefix": "", "case_sensitive": True, "env_file": ".env"}


settings = Settings()


class StoreConfig(BaseModel):
    """Per-instance store configuration, fixed once the store is opened."""

    model_config = ConfigDict(frozen=True)

    root: Path
    shard_width: int = Field(default=15, ge=1)
    verify_on_read: bool = True

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> StoreConfig:
        source = source or settings
        return cls(
            root=Path(source.BLOCKSTORE_ROOT),
            shard_width=source.BLOCKSTORE_SHARD_WIDTH,
            verify_on_read=source.BLOCKSTORE_VERIFY_ON_READ,
        )
