"""Immutable block value: a CID and the bytes it addresses"""

from __future__ import annotations

import os

from multiformats import CID
from pydantic import BaseModel, ConfigDict, Field, StrictBytes

from blockstore.addressing import address_for


class Block(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    cid: CID
    data: StrictBytes = Field(..., repr=False)

    @classmethod
    def from_data(cls, data: bytes) -> Block:
        """Build a block whose CID is computed from ``data``."""
        return cls(cid=address_for(data), data=data)

    # Identity is the CID; the digest stands in for comparing bytes
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self.cid == other.cid

    def __hash__(self) -> int:
        return hash(self.cid)

    @property
    def size(self) -> int:
        return len(self.data)


def make_random_block(size: int) -> Block:
    return Block.from_data(os.urandom(size))
