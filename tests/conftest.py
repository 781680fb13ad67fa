import pytest
from pgpy import PGPKey, PGPUID
from pgpy.constants import (
    CompressionAlgorithm, HashAlgorithm, KeyFlags, PubKeyAlgorithm, SymmetricKeyAlgorithm,
)

BOB_UIDS = ["Bob Example <bob@example.com>", "Robert <robert@work.example>"]
CAROL_UIDS = ["Carol <carol@example.org>", "Carol Work <carol@work.example>"]


def make_key(*uids, with_subkey=False):
    key = PGPKey.new(PubKeyAlgorithm.RSAEncryptOrSign, 2048)
    for name, email, *primary in uids:
        prefs = {"primary": True} if any(primary) else {}
        key.add_uid(
            PGPUID.new(name, email=email),
            usage={KeyFlags.Sign, KeyFlags.Certify},
            hashes=[HashAlgorithm.SHA256],
            ciphers=[SymmetricKeyAlgorithm.AES256],
            compression=[CompressionAlgorithm.ZLIB],
            **prefs,
        )
    if with_subkey:
        sub = PGPKey.new(PubKeyAlgorithm.RSAEncryptOrSign, 2048)
        key.add_subkey(sub, usage={KeyFlags.EncryptCommunications, KeyFlags.EncryptStorage})
    return key.pubkey


def key_bytes(pgpkey, uid_order=None):
    """
    Binary transferable key with its user IDs written in ``uid_order``.

    bytes(pgpkey) writes user IDs primary first, then newest first; this
    lays the packets out the same way but in a fixed order.
    """
    uids = {uid.userid: uid for uid in pgpkey.userids}
    order = uid_order or list(uids)

    out = bytearray(pgpkey._key.__bytearray__())
    for sig in pgpkey._signatures:
        out += sig.__bytearray__()
    for text in order:
        uid = uids[text]
        out += uid._uid.__bytearray__()
        for sig in uid._signatures:
            out += sig.__bytearray__()
    for sub in pgpkey.subkeys.values():
        out += sub.__bytearray__()
    return bytes(out)


@pytest.fixture(scope="session")
def alice():
    return make_key(("Alice", "alice@example.com"), with_subkey=True)


@pytest.fixture(scope="session")
def bob():
    return make_key(("Bob Example", "bob@example.com"), ("Robert", "robert@work.example"))


@pytest.fixture(scope="session")
def carol():
    # the second user ID is the primary one
    return make_key(("Carol", "carol@example.org"), ("Carol Work", "carol@work.example", True))


@pytest.fixture
def write_ring(tmp_path):
    """Write a pubring.gpg made of the given byte strings; returns the GnuPG home."""
    def write(*parts):
        home = tmp_path / "gnupg"
        home.mkdir(exist_ok=True)
        (home / "pubring.gpg").write_bytes(b"".join(parts))
        return home
    return write


@pytest.fixture
def gnupg_home(write_ring, alice, bob):
    """A GnuPG home whose pubring.gpg holds alice then bob, in binary form."""
    return write_ring(key_bytes(alice), key_bytes(bob, BOB_UIDS))
