# keyring_lookup/services/__init__.py
from keyring_lookup.config import LookupSettings, load_settings
from keyring_lookup.services.base import KeyService
from keyring_lookup.services.keybase import KeybaseService
from keyring_lookup.services.local_pgp import LocalPGPService, RingState


def key_service_factory(settings: LookupSettings | None = None) -> KeyService:
    """
    settings.service:
      - "local"   → the GnuPG public keyring on this machine (default)
      - "keybase" → the keybase.io user directory
    """
    settings = settings or load_settings()

    if settings.service == "local":
        return LocalPGPService.from_settings(settings)

    if settings.service == "keybase":
        return KeybaseService(settings.keybase_url, timeout=settings.timeout)

    raise ValueError(f"Unknown key service: {settings.service}")


__all__ = [
    "KeyService",
    "KeybaseService",
    "LocalPGPService",
    "RingState",
    "key_service_factory",
]
