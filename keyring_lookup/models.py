# keyring_lookup/models.py
from __future__ import annotations
from dataclasses import dataclass, asdict, field
from typing import List, Dict, Any


@dataclass
class User:
    """
    Search result for one public key.

    fingerprint is the primary key's ID string (16 hex digits for keys from a
    local keyring); emails holds the identity strings bound to that key, in
    the order they were found.
    """
    fingerprint: str
    emails: List[str] = field(default_factory=list)
    username: str = ""   # only set by remote services (keybase)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            fingerprint=data["fingerprint"],
            emails=list(data.get("emails", [])),
            username=data.get("username", ""),
        )
