"""Content addressing: raw bytes -> CIDv1.

The identifier is built from a sha2-256 multihash. The multihash code (0x12)
is also used as the CID's content codec instead of the usual ``raw`` (0x55),
so identifiers stay compatible with blocks already written to disk.
"""

from __future__ import annotations

import hashlib

from multiformats import CID, multihash

from blockstore.errors import BlockEncodingError

SHA2_256 = 0x12
SHA2_256_NAME = "sha2-256"
CID_VERSION = 1
CID_BASE = "base32"


def address_for(data: bytes) -> CID:
    """Compute the CID of ``data``. Deterministic; no state."""
    digest = hashlib.sha256(data).digest()
    try:
        mh = multihash.wrap(digest, SHA2_256_NAME)
        return CID(CID_BASE, CID_VERSION, SHA2_256_NAME, mh)
    except (ValueError, KeyError) as exc:
        raise BlockEncodingError(f"Cannot address {len(data)} bytes: {exc}") from exc


def canonical_text(cid: CID) -> str:
    """Render ``cid`` in its one canonical form: CIDv1, multibase base32.

    ``str(cid)`` follows whatever base the CID object was decoded with, which
    is not part of CID equality, so paths must not use it directly.
    """
    if cid.version == 0:
        cid = cid.set(version=CID_VERSION)
    return cid.encode(CID_BASE)


def parse_cid(text: str) -> CID:
    """Decode a CID string in any multibase back into a base32 identifier."""
    try:
        cid = CID.decode(text.strip())
        if cid.version == 0:
            cid = cid.set(version=CID_VERSION)
        return cid.set(base=CID_BASE)
    except (ValueError, KeyError) as exc:
        raise BlockEncodingError(f"Invalid CID string: {text!r}") from exc
