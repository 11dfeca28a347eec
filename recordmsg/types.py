"""Platform-neutral data types shared by every messenger adaptor."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class MsgsStore:
    """A place that holds messages: a direct conversation, a group or a guild."""

    id: str
    name: str
    icon: Optional[Path] = None


@dataclass(frozen=True)
class User:
    """A user as seen by a messenger."""

    id: str
    username: str


@dataclass(frozen=True)
class Message:
    """A single chat message."""

    id: str
    sender: User
    text: str