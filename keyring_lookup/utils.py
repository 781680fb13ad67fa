"""
keyring_lookup.utils
--------------------
Small helpers for key ID parsing and query matching.
"""

from __future__ import annotations
import re
from typing import Iterable

from .errors import InvalidFingerprint

_KEY_ID_RE = re.compile(r"[0-9A-Fa-f]+")
MAX_KEY_ID = 2 ** 64 - 1


def parse_key_id(fingerprint: str) -> int:
    # Unsigned 64-bit hex only: no "0x", sign, separators or whitespace
    if not isinstance(fingerprint, str) or not _KEY_ID_RE.fullmatch(fingerprint):
        raise InvalidFingerprint(f"Not a hexadecimal key ID: {fingerprint!r}")

    key_id = int(fingerprint, 16)
    if key_id > MAX_KEY_ID:
        raise InvalidFingerprint(f"Key ID does not fit in 64 bits: {fingerprint!r}")
    return key_id


def normalize_fingerprint(fpr) -> str:
    return str(fpr).replace(" ", "").upper()


def contains_fold(haystack: str, needle: str) -> bool:
    return needle.casefold() in haystack.casefold()


def any_contains_fold(haystacks: Iterable[str], needle: str) -> bool:
    return any(contains_fold(h, needle) for h in haystacks)


_FINGERPRINT_RE = re.compile(r"[0-9A-F]{1,40}")


def parse_fingerprint(fpr: str) -> str:
    """Normalize a full or partial fingerprint; raise InvalidFingerprint if not hex."""
    normalized = normalize_fingerprint(fpr) if fpr else ""
    if not _FINGERPRINT_RE.fullmatch(normalized):
        raise InvalidFingerprint(f"Not a hexadecimal fingerprint: {fpr!r}")
    return normalized
