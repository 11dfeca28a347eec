"""Discord adaptor."""

from __future__ import annotations

import asyncio
import logging
import threading
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, List, Optional, Tuple, Union
import os

import httpx

from recordmsg.discord_models import Channel, DiscordMessage, Friend, Guild, Profile
from recordmsg.messenger import Messenger, MessengerQuery, ParameterizedMessengerQuery
from recordmsg.network import cache_download, http_request
from recordmsg.types import Message, MsgsStore, User

logger = logging.getLogger(__name__)

PROFILE_URL = "https://discord.com/api/v9/users/@me"
RELATIONSHIPS_URL = "https://discord.com/api/v9/users/@me/relationships"
CHANNELS_URL = "https://discord.com/api/v10/users/@me/channels"
GUILDS_URL = "https://discord.com/api/v10/users/@me/guilds"
MESSAGES_URL = "https://discord.com/api/v10/channels/{channel}/messages{before}"
GUILD_ICON_URL = (
    "https://cdn.discordapp.com/icons/{guild}/{hash}.webp?size=80&quality=lossless"
)


class Discord(Messenger, MessengerQuery, ParameterizedMessengerQuery):
    """A Discord account reached through its REST API."""

    def __init__(
        self,
        token: str,
        client: Optional[httpx.AsyncClient] = None,
        cache_dir: Union[str, os.PathLike] = Path("cache"),
    ) -> None:
        self._token = token
        self._client = client
        self._cache_dir = Path(cache_dir)
        self._dms: List[Channel] = []
        self._dms_lock = threading.Lock()

    def __repr__(self) -> str:
        return "Discord()"

    def name(self) -> str:
        return "Discord"

    def auth(self) -> str:
        return self._token

    def query(self) -> "Discord":
        return self

    def param_query(self) -> "Discord":
        return self

    @property
    def dms(self) -> Tuple[Channel, ...]:
        """Direct-message channels from the last conversation fetch."""
        with self._dms_lock:
            return tuple(self._dms)

    def _auth_headers(self) -> List[Tuple[str, str]]:
        return [("Authorization", self._token)]

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
        else:
            async with httpx.AsyncClient() as client:
                yield client

    async def _get(self, url: str):
        async with self._session() as client:
            return await http_request(client, url, self._auth_headers())

    async def get_profile(self) -> User:
        return Profile.from_json(await self._get(PROFILE_URL)).to_user()

    async def get_contacts(self) -> List[User]:
        data = await self._get(RELATIONSHIPS_URL)
        return [Friend.from_json(item).to_user() for item in _as_list(data)]

    async def get_conversation(self) -> List[MsgsStore]:
        data = await self._get(CHANNELS_URL)
        channels = [Channel.from_json(item) for item in _as_list(data)]
        conversations = [channel.to_msgs_store() for channel in channels]
        with self._dms_lock:
            self._dms = channels
        return conversations

    async def get_guilds(self) -> List[MsgsStore]:
        async with self._session() as client:
            data = await http_request(client, GUILDS_URL, self._auth_headers())
            guilds = [Guild.from_json(item) for item in _as_list(data)]
            return list(
                await asyncio.gather(*(self._guild_store(client, g) for g in guilds))
            )

    async def _guild_store(self, client: httpx.AsyncClient, guild: Guild) -> MsgsStore:
        if guild.icon is None:
            return guild.to_msgs_store()
        try:
            icon: Optional[Path] = await cache_download(
                client,
                GUILD_ICON_URL.format(guild=guild.id, hash=guild.icon),
                self._cache_dir / "discord" / "guilds" / guild.id / "imgs",
                f"{guild.icon}.webp",
            )
        except (httpx.HTTPError, OSError, Exception) as exc:  # icon is optional
            logger.error("Failed to download icon for guild: %s\n%s", guild.name, exc)
            icon = None
        return MsgsStore(id=guild.id, name=guild.name, icon=icon)

    async def get_messages(
        self, msgs_location: MsgsStore, load_from_msg: Optional[Message] = None
    ) -> List[Message]:
        before = f"?{load_from_msg.id}" if load_from_msg is not None else ""
        data = await self._get(MESSAGES_URL.format(channel=msgs_location.id, before=before))
        return [DiscordMessage.from_json(item).to_message() for item in _as_list(data)]


def _as_list(data) -> list:
    if not isinstance(data, list):
        from recordmsg.messenger import MessengerError

        raise MessengerError("expected a JSON array")
    return data