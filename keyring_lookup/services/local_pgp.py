"""
keyring_lookup.services.local_pgp
---------------------------------
Key lookup against the local GnuPG public keyring (``pubring.gpg``).

The ring is decoded on first use and cached for the lifetime of the service.
A failed load leaves the service unloaded, so the next call tries again.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Optional
import threading

from pgpy import PGPKey

from keyring_lookup.config import LookupSettings
from keyring_lookup.errors import (
    AmbiguousOrMissingKey, KeyringUnreadable, NoMatches,
)
from keyring_lookup.keyring import Entity, KeyRing
from keyring_lookup.logger import service_logger
from keyring_lookup.models import User
from keyring_lookup.ringfile import PublicRingFile
from keyring_lookup.services.base import KeyService
from keyring_lookup.utils import any_contains_fold, contains_fold, parse_key_id

log = service_logger("LocalPGP")


class RingState(Enum):
    UNLOADED = "unloaded"
    LOADED = "loaded"


def user_for(entity: Entity) -> User:
    return User(
        fingerprint=entity.key.fingerprint.keyid,
        emails=list(entity.identities),
    )


class LocalPGPService(KeyService):
    name = "local"

    def __init__(self, ringfile: PublicRingFile):
        ringfile.stat()
        self.ringfile = ringfile
        self.state = RingState.UNLOADED
        self._ring: Optional[KeyRing] = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Optional[LookupSettings] = None) -> "LocalPGPService":
        settings = settings or LookupSettings()
        return cls(PublicRingFile.resolve(settings.gnupg_home, settings.home))

    def load_ring(self) -> KeyRing:
        """Return the cached ring, decoding the keyring file on first use."""
        if self.state is RingState.LOADED:
            return self._ring

        with self._lock:
            if self.state is RingState.LOADED:
                return self._ring

            log.debug(f"[RING] loading {self.ringfile.location}")
            try:
                with self.ringfile.open() as reader:
                    ring = KeyRing.from_blob(reader.read())
            except OSError as e:
                log.error(f"[RING] cannot open {self.ringfile.location}: {e}")
                raise KeyringUnreadable(f"Cannot open {self.ringfile.location}") from e
            except Exception as e:
                log.error(f"[RING] cannot decode {self.ringfile.location}: {e}")
                raise KeyringUnreadable(f"Cannot decode {self.ringfile.location}") from e

            self._ring = ring
            self.state = RingState.LOADED
            log.info(f"[RING] loaded {len(ring)} keys from {self.ringfile.location}")
            return ring

    def matches(self, query: str) -> List[User]:
        """
        Find every key whose key ID or identity (name and email) contains
        ``query``, ignoring case. Raises NoMatches when nothing matched.
        """
        ring = self.load_ring()

        users = []
        for entity in ring:
            user = user_for(entity)
            if self._is_match(query, user):
                users.append(user)

        log.debug(f"[MATCH] query={query!r} matched={len(users)}")
        if not users:
            raise NoMatches(f"No keys match {query!r}")
        return users

    @staticmethod
    def _is_match(query: str, user: User) -> bool:
        return contains_fold(user.fingerprint, query) or any_contains_fold(user.emails, query)

    def key(self, user: User) -> PGPKey:
        """
        Resolve ``user.fingerprint`` (a hex key ID) to exactly one key from
        the ring. Raises InvalidFingerprint for non-hex input and
        AmbiguousOrMissingKey unless exactly one key carries that ID.
        """
        key_id = parse_key_id(user.fingerprint)

        keys = self.load_ring().keys_by_id(key_id)
        if len(keys) != 1:
            raise AmbiguousOrMissingKey(
                f"Expected one key for {user.fingerprint}, found {len(keys)}"
            )
        return keys[0].key
