# keyring_lookup/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import os

DEFAULT_KEYBASE_URL = "https://keybase.io"
DEFAULT_TIMEOUT = 5.0


@dataclass
class LookupSettings:
    gnupg_home: Optional[str] = None
    home: Optional[str] = None
    service: str = "local"          # local | keybase
    keybase_url: str = DEFAULT_KEYBASE_URL
    timeout: float = DEFAULT_TIMEOUT


def load_settings(config: dict | None = None, environ: Mapping[str, str] | None = None) -> LookupSettings:
    """
    Resolve lookup settings for a caller.

    Precedence: explicit ``config`` entries, then environment variables, then
    defaults. This is the only place the process environment is read.
    """
    config = config or {}
    env = os.environ if environ is None else environ

    return LookupSettings(
        # an empty GNUPGHOME counts as unset
        gnupg_home=config.get("gnupg_home") or env.get("GNUPGHOME") or None,
        home=config.get("home") or env.get("HOME") or None,
        service=(config.get("service") or env.get("KEY_LOOKUP_SERVICE", "local")).lower(),
        keybase_url=config.get("keybase_url") or env.get("KEYBASE_URL", DEFAULT_KEYBASE_URL),
        timeout=float(config.get("timeout") or env.get("KEY_LOOKUP_TIMEOUT", DEFAULT_TIMEOUT)),
    )
