"""Fixed-width directory sharding of CID strings"""

from __future__ import annotations

from multiformats import CID

from blockstore.addressing import canonical_text


def path_for(cid: CID, shard_width: int) -> tuple[str, ...]:
    """Split the canonical string of ``cid`` into ``shard_width``-sized chunks.

    The last chunk is the file name and may be shorter; all others are
    directory levels. Joining the chunks gives back ``canonical_text(cid)``.
    """
    if shard_width < 1:
        raise ValueError(f"shard_width must be >= 1, got {shard_width}")
    text = canonical_text(cid)
    return tuple(text[i : i + shard_width] for i in range(0, len(text), shard_width))
