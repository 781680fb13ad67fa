"""
keyring_lookup
==============
Find OpenPGP public keys for a person or fingerprint.

Provides:
- LocalPGPService: fuzzy search and exact key ID lookup in the local
  GnuPG public keyring (pubring.gpg)
- KeybaseService: the same contract against keybase.io
- key_service_factory: pick a service from settings or the environment
"""

from keyring_lookup.config import LookupSettings, load_settings
from keyring_lookup.errors import (
    AmbiguousOrMissingKey, InvalidFingerprint, KeyLookupError, KeyringNotFound,
    KeyringUnreadable, KeyServiceUnavailable, NoMatches, NoRingLoaded,
)
from keyring_lookup.models import User
from keyring_lookup.ringfile import PublicRingFile
from keyring_lookup.services import KeybaseService, KeyService, LocalPGPService, key_service_factory

__all__ = [
    "AmbiguousOrMissingKey",
    "InvalidFingerprint",
    "KeyLookupError",
    "KeyService",
    "KeybaseService",
    "KeyringNotFound",
    "KeyringUnreadable",
    "KeyServiceUnavailable",
    "LocalPGPService",
    "LookupSettings",
    "NoMatches",
    "NoRingLoaded",
    "PublicRingFile",
    "User",
    "key_service_factory",
    "load_settings",
]
