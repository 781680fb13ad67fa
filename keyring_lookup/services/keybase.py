# keyring_lookup/services/keybase.py
from urllib.parse import quote

import requests
from pgpy import PGPKey

from keyring_lookup.errors import (
    AmbiguousOrMissingKey, KeyServiceUnavailable, NoMatches,
)
from keyring_lookup.logger import service_logger
from keyring_lookup.models import User
from keyring_lookup.services.base import KeyService
from keyring_lookup.utils import normalize_fingerprint, parse_fingerprint

log = service_logger("Keybase")


class KeybaseService(KeyService):
    """
    Key lookup against the keybase.io user directory.

    matches() uses the autocomplete API; key() downloads the user's armored
    public key for the chosen fingerprint.
    """
    name = "keybase"

    def __init__(self, base_url: str = "https://keybase.io", timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, url: str, params: dict) -> requests.Response:
        log.debug(f"[KEYBASE GET] → {url} | params={params}")
        try:
            res = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            log.error(f"[KEYBASE GET] {url}: {e}")
            raise KeyServiceUnavailable(f"Keybase request failed: {e}") from e

        if not res.ok:
            log.error(f"[KEYBASE GET] {res.status_code}: {res.text}")
            raise KeyServiceUnavailable(f"Keybase returned {res.status_code} {res.reason}")
        return res

    def matches(self, query: str):
        url = f"{self.base_url}/_/api/1.0/user/autocomplete.json"
        try:
            payload = self._get(url, {"q": query}).json()
        except ValueError as e:
            raise KeyServiceUnavailable("Keybase sent a malformed autocomplete response") from e
        if not isinstance(payload, dict):
            raise KeyServiceUnavailable("Keybase sent a malformed autocomplete response")

        completions = payload.get("completions") or []

        users = []
        for completion in completions:
            if not isinstance(completion, dict):
                continue
            components = completion.get("components", {})
            fingerprint = (components.get("key_fingerprint") or {}).get("val")
            if not fingerprint:
                continue

            full_name = (components.get("full_name") or {}).get("val")
            users.append(User(
                fingerprint=normalize_fingerprint(fingerprint),
                emails=[full_name] if full_name else [],
                username=(components.get("username") or {}).get("val", ""),
            ))

        log.info(f"[KEYBASE MATCH] query={query!r} matched={len(users)}")
        if not users:
            raise NoMatches(f"No keybase users match {query!r}")
        return users

    def key(self, user: User) -> PGPKey:
        if not user.username:
            raise AmbiguousOrMissingKey("A keybase username is required to fetch a key")

        wanted = parse_fingerprint(user.fingerprint)

        url = f"{self.base_url}/{quote(user.username, safe='')}/pgp_keys.asc"
        res = self._get(url, {"fingerprint": wanted.lower()})
        try:
            pgpkey, _ = PGPKey.from_blob(res.text)
        except Exception as e:
            log.error(f"[KEYBASE KEY] cannot decode key for {user.username}: {e}")
            raise KeyServiceUnavailable(f"Keybase sent an unreadable key for {user.username}") from e

        if not normalize_fingerprint(pgpkey.fingerprint).endswith(wanted):
            raise AmbiguousOrMissingKey(
                f"Keybase key for {user.username} does not match {user.fingerprint}"
            )
        return pgpkey
