"""
keyring_lookup.ringfile
-----------------------
Location of the local GnuPG public keyring.

The GnuPG home is ``gnupg_home_override`` when one is given, otherwise
``<home>/.gnupg``. The keyring is always ``pubring.gpg`` inside it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import BinaryIO, Optional
import os

from .errors import KeyringNotFound

PUBRING_NAME = "pubring.gpg"


@dataclass(frozen=True)
class PublicRingFile:
    location: str

    @classmethod
    def resolve(cls, gnupg_home_override: Optional[str] = None, home: Optional[str] = None) -> "PublicRingFile":
        if gnupg_home_override:
            gnupg_home = gnupg_home_override
        else:
            gnupg_home = os.path.join(home or os.path.expanduser("~"), ".gnupg")
        return cls(location=os.path.join(gnupg_home, PUBRING_NAME))

    def stat(self) -> os.stat_result:
        """Return the file's stat, raising KeyringNotFound if missing or empty."""
        try:
            info = os.stat(self.location)
        except OSError as e:
            raise KeyringNotFound(f"No public keyring at {self.location}") from e

        if info.st_size == 0:
            raise KeyringNotFound(f"Public keyring at {self.location} is empty")
        return info

    def open(self) -> BinaryIO:
        return open(self.location, "rb")
