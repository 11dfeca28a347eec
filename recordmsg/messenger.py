"""Abstract interfaces that every messenger adaptor implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from recordmsg.types import Message, MsgsStore, User


class MessengerError(Exception):
    """Raised when a messenger operation fails."""


class Messenger(ABC):
    """A logged-in account on some messaging platform."""

    @abstractmethod
    def name(self) -> str:
        """Name of the platform."""

    @abstractmethod
    def auth(self) -> str:
        """Credential used to talk to the platform."""

    def query(self) -> Optional["MessengerQuery"]:
        """The account-wide query interface, if the platform supports it."""
        return None

    def param_query(self) -> Optional["ParameterizedMessengerQuery"]:
        """The parameterized query interface, if the platform supports it."""
        return None

    def _identity(self) -> str:
        return f"{self.name()}{self.auth()}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Messenger):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())


class MessengerQuery(ABC):
    """Queries that need no parameters."""

    @abstractmethod
    async def get_profile(self) -> User:
        """Fetch the profile of the logged-in user."""

    @abstractmethod
    async def get_contacts(self) -> List[User]:
        """Users from the friend list."""

    @abstractmethod
    async def get_conversation(self) -> List[MsgsStore]:
        """Direct conversations."""

    @abstractmethod
    async def get_guilds(self) -> List[MsgsStore]:
        """Large groups."""


class ParameterizedMessengerQuery(ABC):
    """Queries that take parameters."""

    @abstractmethod
    async def get_messages(
        self, msgs_location: MsgsStore, load_from_msg: Optional[Message]
    ) -> List[Message]:
        """Messages stored in ``msgs_location``, optionally starting from a message."""