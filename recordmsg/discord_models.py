"""Discord JSON payloads and their conversion to platform-neutral types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from recordmsg.messenger import MessengerError
from recordmsg.types import Message, MsgsStore, User

T = TypeVar("T")

_UNKNOWN_CHANNEL_NAME = "Fix later"


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise MessengerError(f"expected a JSON object for {what}, got {type(data).__name__}")
    return data


def _field(
    data: Mapping[str, Any], key: str, kind: Union[Type[T], Tuple[type, ...]]
) -> Any:
    try:
        value = data[key]
    except KeyError:
        raise MessengerError(f"missing field {key!r}") from None
    if not isinstance(value, kind):
        raise MessengerError(f"field {key!r} has the wrong type")
    return value


def _optional(
    data: Mapping[str, Any], key: str, kind: Union[Type[T], Tuple[type, ...]]
) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, kind):
        raise MessengerError(f"field {key!r} has the wrong type")
    return value


# === Users ===


@dataclass(frozen=True)
class Profile:
    """The logged-in user's own profile."""

    id: str
    username: str

    @classmethod
    def from_json(cls, data: Any) -> "Profile":
        obj = _mapping(data, "profile")
        return cls(id=_field(obj, "id", str), username=_field(obj, "username", str))

    def to_user(self) -> User:
        return User(id=self.id, username=self.username)


@dataclass(frozen=True)
class DiscordUser:
    """A Discord user object."""

    id: str
    username: str

    @classmethod
    def from_json(cls, data: Any) -> "DiscordUser":
        obj = _mapping(data, "user")
        return cls(id=_field(obj, "id", str), username=_field(obj, "username", str))

    def to_user(self) -> User:
        return User(id=self.id, username=self.username)


@dataclass(frozen=True)
class Friend:
    """An entry of the relationship list."""

    id: str
    user: DiscordUser

    @classmethod
    def from_json(cls, data: Any) -> "Friend":
        obj = _mapping(data, "friend")
        return cls(
            id=_field(obj, "id", str),
            user=DiscordUser.from_json(_field(obj, "user", Mapping)),
        )

    def to_user(self) -> User:
        return User(id=self.id, username=self.user.username)


@dataclass(frozen=True)
class Recipient:
    """A participant of a direct conversation."""

    username: str

    @classmethod
    def from_json(cls, data: Any) -> "Recipient":
        obj = _mapping(data, "recipient")
        return cls(username=_field(obj, "username", str))


# === Channels ===


class ChannelType(IntEnum):
    """Discord channel kinds, by their wire number."""

    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    ANNOUNCEMENT_THREAD = 6
    PUBLIC_THREAD = 7
    PRIVATE_THREAD = 8
    GUILD_STAGE_VOICE = 9
    GUILD_DIRECTORY = 10
    GUILD_FORUM = 11
    GUILD_MEDIA = 12


@dataclass(frozen=True)
class Channel:
    """A direct-message channel."""

    id: str
    last_message_id: Optional[str] = None
    name: Optional[str] = None
    recipients: List[Recipient] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> "Channel":
        obj = _mapping(data, "channel")
        return cls(
            id=_field(obj, "id", str),
            last_message_id=_optional(obj, "last_message_id", str),
            name=_optional(obj, "name", str),
            recipients=[Recipient.from_json(r) for r in _field(obj, "recipients", list)],
        )

    def to_msgs_store(self) -> MsgsStore:
        if self.name is not None:
            name = self.name
        elif self.recipients:
            name = self.recipients[0].username
        else:
            name = _UNKNOWN_CHANNEL_NAME
        return MsgsStore(id=self.id, name=name, icon=None)


@dataclass(frozen=True)
class DiscordMessage:
    """A message as returned by the channel messages endpoint."""

    id: str
    author: DiscordUser
    content: str

    @classmethod
    def from_json(cls, data: Any) -> "DiscordMessage":
        obj = _mapping(data, "message")
        return cls(
            id=_field(obj, "id", str),
            author=DiscordUser.from_json(_field(obj, "author", Mapping)),
            content=_field(obj, "content", str),
        )

    def to_message(self) -> Message:
        return Message(id=self.id, sender=self.author.to_user(), text=self.content)


@dataclass(frozen=True)
class Guild:
    """A Discord server."""

    id: str
    name: str
    icon: Optional[str] = None

    @classmethod
    def from_json(cls, data: Any) -> "Guild":
        obj = _mapping(data, "guild")
        return cls(
            id=_field(obj, "id", str),
            name=_field(obj, "name", str),
            icon=_optional(obj, "icon", str),
        )

    def to_msgs_store(self) -> MsgsStore:
        return MsgsStore(id=self.id, name=self.name, icon=None)