from __future__ import annotations
from typing import List

from pgpy import PGPKey

from keyring_lookup.models import User


class KeyService:
    """
    Contract shared by every key lookup backend.

    matches() returns a non-empty list of users or raises; key() resolves one
    user to exactly one public key or raises.
    """
    name: str = "base"

    def matches(self, query: str) -> List[User]:
        raise NotImplementedError

    def key(self, user: User) -> PGPKey:
        raise NotImplementedError
