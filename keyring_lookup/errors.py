from __future__ import annotations


class KeyLookupError(Exception):
    pass


class KeyringNotFound(KeyLookupError, FileNotFoundError):
    """The public keyring file is missing or empty."""


class NoRingLoaded(KeyLookupError):
    pass


class KeyringUnreadable(NoRingLoaded):
    """The keyring exists but could not be opened or decoded."""


class NoMatches(KeyLookupError):
    pass


class InvalidFingerprint(KeyLookupError, ValueError):
    pass


class AmbiguousOrMissingKey(KeyLookupError):
    """Zero or more than one key found for an exact key ID."""


class KeyServiceUnavailable(KeyLookupError):
    pass
