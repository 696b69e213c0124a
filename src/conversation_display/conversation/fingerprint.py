from __future__ import annotations

import hashlib

from conversation_display.core.enums import RecordKind

DEFAULT_DIGEST = "sha256"


def check_digest(digest_name: str) -> str:
    """Return *digest_name* if it names a fixed-length hashlib digest.

    Raises ValueError for unknown names and for the variable-length
    ``shake_*`` family, which needs an explicit output length.
    """
    if digest_name not in hashlib.algorithms_guaranteed or digest_name.startswith("shake_"):
        raise ValueError(f"Unsupported fingerprint digest {digest_name!r}")
    return digest_name


def fingerprint(kind: RecordKind | str, message_id: int, digest_name: str = DEFAULT_DIGEST) -> int:
    """Return a stable signed 64-bit id for a record's kind and message id.

    The key ``"<KIND>::<id>"`` is digested and the first eight bytes are read
    as a big-endian signed integer. Content never feeds into it.
    """
    unique = f"{RecordKind(kind).value}::{message_id}"
    digest = hashlib.new(check_digest(digest_name), unique.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=True)
