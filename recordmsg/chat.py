"""Chat page: the logged-in accounts, their conversations and messages."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from recordmsg.auth import AuthStore, MessengerEntry
from recordmsg.messenger import MessengerError
from recordmsg.types import Message, MsgsStore, User

PLACEHOLDER_ICON = Path("./public/imgs/placeholder.jpg")
NAVBAR_ICON_SIZE = 48.0
SIDEBAR_WIDTH = 168
CONTACTS_LABEL = "Contacts"
SEARCH_PLACEHOLDER = "Search"
NEW_MESSAGE_PLACEHOLDER = "New msg..."


# === Messages the page reacts to ===


@dataclass(frozen=True)
class OpenContacts:
    """Show the contact list."""


@dataclass(frozen=True)
class OpenConversation:
    """Load and show the messages of ``msgs_store``."""

    msgs_store: MsgsStore


ChatPageMessage = Union[OpenContacts, OpenConversation]


@dataclass
class MessengerData:
    """Everything fetched for one logged-in account."""

    profile: User
    contacts: List[User]
    conversations: List[MsgsStore]
    guilds: List[MsgsStore]
    chat: Dict[str, str] = field(default_factory=dict)


# === What the page shows ===


@dataclass(frozen=True)
class ContactsView:
    """The main area while the contact list is open."""

    search_placeholder: str
    usernames: Tuple[str, ...]


@dataclass(frozen=True)
class ChatView:
    """The main area while a conversation is open."""

    texts: Tuple[str, ...]
    input_placeholder: str


@dataclass(frozen=True)
class WindowView:
    """The whole chat window."""

    profile_name: str
    guild_icons: Tuple[Path, ...]
    contacts_label: str
    conversations: Tuple[MsgsStore, ...]
    sidebar_width: int
    main: Union[ContactsView, ChatView]


async def _fetch(entry: MessengerEntry) -> MessengerData:
    query = entry.auth.query()
    if query is None:
        raise MessengerError(f"{entry.auth.name()} does not support queries")
    profile, conversations, contacts, guilds = await asyncio.gather(
        query.get_profile(),
        query.get_conversation(),
        query.get_contacts(),
        query.get_guilds(),
    )
    return MessengerData(
        profile=profile,
        contacts=list(contacts),
        conversations=list(conversations),
        guilds=list(guilds),
    )


class MessengerWindow:
    """State of the chat window."""

    def __init__(self, auth_store: AuthStore, messengers_data: Sequence[MessengerData]) -> None:
        self.auth_store = auth_store
        self.messengers_data: List[MessengerData] = list(messengers_data)
        self._messages: Optional[List[Message]] = None

    def __repr__(self) -> str:
        return (
            f"MessengerWindow(main={'chat' if self._messages is not None else 'contacts'}, "
            f"messengers_data={self.messengers_data!r})"
        )

    @classmethod
    async def create(cls, auth_store: AuthStore) -> "MessengerWindow":
        """Fetch profile, conversations, contacts and guilds of every account."""
        data = await asyncio.gather(*(_fetch(entry) for entry in auth_store.messengers()))
        return cls(auth_store, data)

    def _first(self) -> MessengerData:
        if not self.messengers_data:
            raise MessengerError("no messenger is logged in")
        return self.messengers_data[0]

    async def update(self, message: ChatPageMessage) -> None:
        """React to ``message``."""
        match message:
            case OpenConversation(msgs_store=msgs_store):
                entries = self.auth_store.messengers()
                if not entries:
                    raise MessengerError("no messenger is logged in")
                param_query = entries[0].auth.param_query()
                if param_query is None:
                    raise MessengerError(
                        f"{entries[0].auth.name()} does not support message queries"
                    )
                self._messages = list(await param_query.get_messages(msgs_store, None))
            case OpenContacts():
                self._messages = None
            case _:
                raise TypeError(f"unexpected chat message: {message!r}")

    def view(self) -> WindowView:
        """Describe the window as it should be shown now."""
        data = self._first()
        main: Union[ContactsView, ChatView]
        if self._messages is None:
            main = ContactsView(
                search_placeholder=SEARCH_PLACEHOLDER,
                usernames=tuple(user.username for user in data.contacts),
            )
        else:
            main = ChatView(
                texts=tuple(msg.text for msg in self._messages),
                input_placeholder=NEW_MESSAGE_PLACEHOLDER,
            )
        return WindowView(
            profile_name=data.profile.username,
            guild_icons=tuple(
                guild.icon if guild.icon is not None else PLACEHOLDER_ICON
                for guild in data.guilds
            ),
            contacts_label=CONTACTS_LABEL,
            conversations=tuple(data.conversations),
            sidebar_width=SIDEBAR_WIDTH,
            main=main,
        )