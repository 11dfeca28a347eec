"""Persistent store of logged-in messenger accounts."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

from recordmsg.login import Platform
from recordmsg.messenger import Messenger


@dataclass
class MessengerEntry:
    """A messenger account and whether it is written to disk."""

    auth: Messenger
    save_to_disk: bool


def _strip_line_ending(raw_line: str) -> str:
    line = raw_line.rstrip("\n")
    if line.endswith("\r"):
        return line[:-1]
    return line


class AuthStore:
    """Accounts kept in a ``platform:credential`` file, one per line."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        file_path = Path(path)
        file_path.touch(exist_ok=True)
        self._file = open(file_path, "r+", encoding="utf-8", newline="")
        self._messengers: List[MessengerEntry] = []
        try:
            for raw_line in self._file:
                platform_name, sep, credential = _strip_line_ending(raw_line).partition(":")
                if not sep:
                    continue
                messenger = Platform.from_name(platform_name).to_messenger(credential)
                self._messengers.append(MessengerEntry(messenger, save_to_disk=True))
        except BaseException:
            self._file.close()
            raise

    def _sync_disk(self) -> None:
        self._file.seek(0)
        self._file.truncate(0)
        for entry in self._messengers:
            if entry.save_to_disk:
                self._file.write(f"{entry.auth.name()}:{entry.auth.auth()}\n")
        self._file.flush()

    def is_empty(self) -> bool:
        return not self._messengers

    def messengers(self) -> Tuple[MessengerEntry, ...]:
        return tuple(self._messengers)

    def contains_auth(self, auth: Messenger) -> bool:
        return any(entry.auth == auth for entry in self._messengers)

    def add_auth(self, auth: Messenger) -> bool:
        """Add ``auth`` unless it is already known; not saved until ``save_to_disk``."""
        if self.contains_auth(auth):
            return False
        self._messengers.append(MessengerEntry(auth, save_to_disk=False))
        return True

    def save_to_disk(self) -> None:
        """Mark every account for saving and write them all out."""
        for entry in self._messengers:
            entry.save_to_disk = True
        self._sync_disk()

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "AuthStore":
        return self

    def __exit__(self, *args) -> None:
        self.close()