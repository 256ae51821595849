"""Blockstore interface and sharded local filesystem implementation.

Layout: {root}/{chunk1}/{chunk2}/.../{chunkN}, where the chunks are
consecutive ``shard_width``-character slices of the block's CID string and
the last chunk names a file holding the raw block bytes.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Protocol, runtime_checkable

import aiofiles
import aiofiles.os
from multiformats import CID

from blockstore.block import Block
from blockstore.config import StoreConfig, settings
from blockstore.errors import BlockIntegrityError
from blockstore.sharding import path_for

logger = logging.getLogger(__name__)


@runtime_checkable
class Blockstore(Protocol):
    """Capability set every block store backend provides."""

    async def put(self, block: Block) -> None:
        """Persist a block under its CID."""
        ...

    async def has(self, cid: CID) -> bool:
        """Check whether a block is stored. Never raises."""
        ...

    async def get(self, cid: CID) -> Block | None:
        """Read a block back, or None if it is absent."""
        ...

    async def delete(self, cid: CID) -> None:
        """Remove a block. Raises FileNotFoundError if it is absent."""
        ...


class FsStore:
    """Content-addressed block store on the local filesystem.

    Every operation is a coroutine that awaits its filesystem call. The store
    keeps no index and no cache: paths are a pure function of the config and
    the CID, so blocks written by an earlier handle are visible immediately.
    """

    def __init__(self, config: StoreConfig) -> None:
        self._config = config

    @classmethod
    async def open(
        cls,
        root: str | Path | None = None,
        *,
        shard_width: int | None = None,
        verify_on_read: bool | None = None,
    ) -> FsStore:
        defaults = StoreConfig.from_settings(settings)
        config = StoreConfig(
            root=Path(root) if root else defaults.root,
            shard_width=shard_width if shard_width is not None else defaults.shard_width,
            verify_on_read=verify_on_read if verify_on_read is not None else defaults.verify_on_read,
        )
        await aiofiles.os.makedirs(config.root, exist_ok=True)
        logger.debug("Opened block store at %s (shard_width=%d)", config.root, config.shard_width)
        return cls(config)

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def root(self) -> Path:
        return self._config.root

    @staticmethod
    def block_path_raw(shard_width: int, cid: CID) -> Path:
        return Path(*path_for(cid, shard_width))

    def block_path(self, cid: CID) -> Path:
        return self._config.root / self.block_path_raw(self._config.shard_width, cid)

    async def put(self, block: Block) -> None:
        path = self.block_path(block.cid)

        # Write beside the target then rename, so readers never see a partial file
        tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
        try:
            # Safe when several writers create the same levels at once
            await aiofiles.os.makedirs(path.parent, exist_ok=True)
            async with aiofiles.open(tmp_path, "wb") as f:
                await f.write(block.data)
            await aiofiles.os.replace(tmp_path, path)
        except OSError:
            logger.exception("put failed for block %s", block.cid)
            if await aiofiles.os.path.isfile(tmp_path):
                await aiofiles.os.remove(tmp_path)
            raise

        logger.debug("Stored block %s (%d bytes) at %s", block.cid, len(block.data), path)

    async def has(self, cid: CID) -> bool:
        # isfile reports False on any OSError
        return await aiofiles.os.path.isfile(self.block_path(cid))

    async def get(self, cid: CID) -> Block | None:
        path = self.block_path(cid)
        try:
            async with aiofiles.open(path, "rb") as f:
                data = await f.read()
        except FileNotFoundError:
            return None

        block = Block.from_data(data)
        if block.cid != cid:
            if self._config.verify_on_read:
                logger.warning("Block at %s re-addresses to %s, expected %s", path, block.cid, cid)
                raise BlockIntegrityError(expected=cid, actual=block.cid)
            logger.debug("Block at %s re-addresses to %s, returning it unchecked", path, block.cid)
        return block

    async def delete(self, cid: CID) -> None:
        path = self.block_path(cid)
        await aiofiles.os.remove(path)
        logger.debug("Deleted block %s", cid)

    # No buffered state, nothing to flush
    async def close(self) -> None:
        return None

    async def __aenter__(self) -> FsStore:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
