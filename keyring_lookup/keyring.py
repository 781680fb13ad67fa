"""
keyring_lookup.keyring
----------------------
In-memory list of the keys decoded from a keyring file.

PGPy does all packet decoding. The keyring is first cut into one chunk per
primary key, and each chunk is decoded on its own, so a key never picks up
user IDs from its neighbours and a key that appears twice stays two entries.
User IDs are recorded in the order the file lists them.

Exact key ID lookups follow an OpenPGP ``EntityList``: an entity matches if
its primary key or one of its subkeys carries the requested 64-bit ID.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple, Union

from pgpy import PGPKey
from pgpy.packet import Packet, Primary, Sub, UserID


@dataclass
class Entity:
    key: PGPKey
    identities: List[str] = field(default_factory=list)

    @classmethod
    def of(cls, pgpkey: PGPKey) -> "Entity":
        # no packet order available; PGPy lists the primary user ID first
        return cls(pgpkey, [uid.userid for uid in pgpkey.userids])

    @property
    def key_id(self) -> int:
        return _key_id(self.key)


def _key_id(pgpkey: PGPKey) -> int:
    return int(pgpkey.fingerprint.keyid, 16)


def split_packets(blob: bytes) -> List[Tuple[bytes, List[str]]]:
    """
    Cut a binary or armored keyring into ``(chunk, user_ids)`` pairs, one per
    primary key packet. Packets before the first primary key are dropped.
    """
    body = PGPKey.ascii_unarmor(blob)["body"]
    raw = bytes(body)
    data = bytearray(body)

    chunks = []
    offset = 0
    while data:
        before = len(data)
        pkt = Packet(data)  # consumes the packet from data
        consumed = before - len(data)
        if consumed <= 0:
            raise ValueError(f"Keyring packet at offset {offset} could not be read")

        if isinstance(pkt, Primary) and not isinstance(pkt, Sub):
            chunks.append([offset, offset + consumed, []])
        elif chunks:
            chunks[-1][1] = offset + consumed
            if isinstance(pkt, UserID):
                chunks[-1][2].append(pkt.uid)
        offset += consumed

    return [(raw[start:end], uids) for start, end, uids in chunks]


class KeyRing:
    def __init__(self, entities: Iterable[Union[Entity, PGPKey]] = ()):
        self._entities: List[Entity] = [
            e if isinstance(e, Entity) else Entity.of(e) for e in entities
        ]

    @classmethod
    def from_blob(cls, blob: bytes) -> "KeyRing":
        """Decode every primary key in an armored or binary keyring blob."""
        entities = []
        for chunk, uids in split_packets(blob):
            pgpkey, _ = PGPKey.from_blob(chunk)
            entities.append(Entity(pgpkey, uids))
        return cls(entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def keys_by_id(self, key_id: int) -> List[Entity]:
        found = []
        for entity in self._entities:
            if entity.key_id == key_id:
                found.append(entity)
                continue
            if any(_key_id(sub) == key_id for sub in entity.key.subkeys.values()):
                found.append(entity)
        return found
