"""In-memory Blockstore backend, mainly for tests and embedding"""

from __future__ import annotations

import errno
import logging

from multiformats import CID

from blockstore.block import Block

logger = logging.getLogger(__name__)


class MemoryStore:
    """Dict-backed store with the same absent-block semantics as FsStore."""

    def __init__(self) -> None:
        self._blocks: dict[CID, bytes] = {}

    def __len__(self) -> int:
        return len(self._blocks)

    async def put(self, block: Block) -> None:
        self._blocks[block.cid] = bytes(block.data)
        logger.debug("Stored block %s (%d bytes) in memory", block.cid, len(block.data))

    async def has(self, cid: CID) -> bool:
        return cid in self._blocks

    async def get(self, cid: CID) -> Block | None:
        data = self._blocks.get(cid)
        if data is None:
            return None
        return Block.from_data(data)

    async def delete(self, cid: CID) -> None:
        try:
            del self._blocks[cid]
        except KeyError:
            raise FileNotFoundError(errno.ENOENT, "Block not found", str(cid)) from None
        logger.debug("Deleted block %s from memory", cid)
