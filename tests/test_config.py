"""Tests for settings, store config and logging setup"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from blockstore.config import Settings, StoreConfig
from blockstore.log import configure_logging
from blockstore.store import FsStore


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("BLOCKSTORE_ROOT", "BLOCKSTORE_SHARD_WIDTH", "BLOCKSTORE_VERIFY_ON_READ", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        s = Settings(_env_file=None)
        assert s.BLOCKSTORE_SHARD_WIDTH == 15
        assert s.BLOCKSTORE_VERIFY_ON_READ is True

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BLOCKSTORE_ROOT", str(tmp_path))
        monkeypatch.setenv("BLOCKSTORE_SHARD_WIDTH", "4")
        monkeypatch.setenv("BLOCKSTORE_VERIFY_ON_READ", "false")

        config = StoreConfig.from_settings(Settings(_env_file=None))
        assert config.root == tmp_path
        assert config.shard_width == 4
        assert config.verify_on_read is False

    def test_rejects_zero_shard_width(self, monkeypatch):
        monkeypatch.setenv("BLOCKSTORE_SHARD_WIDTH", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestStoreConfig:
    def test_frozen(self):
        config = StoreConfig(root=Path("/tmp/x"))
        with pytest.raises(ValidationError):
            config.shard_width = 3

    def test_rejects_zero_shard_width(self):
        with pytest.raises(ValidationError):
            StoreConfig(root=Path("/tmp/x"), shard_width=0)

    @pytest.mark.asyncio
    async def test_open_rejects_zero_shard_width(self, tmp_path):
        with pytest.raises(ValidationError):
            await FsStore.open(tmp_path, shard_width=0)

    @pytest.mark.asyncio
    async def test_open_falls_back_to_settings(self, monkeypatch, tmp_path):
        from blockstore import store as store_module

        monkeypatch.setattr(store_module, "settings", Settings(_env_file=None, BLOCKSTORE_ROOT=str(tmp_path / "env-root"), BLOCKSTORE_SHARD_WIDTH=7))
        store = await FsStore.open()
        assert store.root == tmp_path / "env-root"
        assert store.config.shard_width == 7
        assert store.root.is_dir()


def test_configure_logging():
    configure_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    configure_logging(logging.WARNING)
    assert logging.getLogger().level == logging.WARNING
