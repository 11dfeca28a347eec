# recordmsg

recordmsg is the core of a small chat client that can talk to several
messaging platforms. At the moment it supports Discord. It can:

- keep the list of logged-in accounts in a plain text file, one
  `Platform:token` line per account (`recordmsg.auth.AuthStore`);
- fetch your profile, your friends, your direct-message conversations and
  your guilds, downloading guild icons into a local cache the first time
  (`recordmsg.discord.Discord`);
- load the messages of a conversation;
- hold the state of a login page (`recordmsg.login.Login`) and of a chat
  window (`recordmsg.chat.MessengerWindow`), each with an `update` method
  that reacts to messages and a `view` method that describes what to show.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Command line

```
recordmsg
```

This starts a console front end. It reads saved logins from `./LoginInfo`
(another file can be given with `--auth-file PATH`; the file is created if
it does not exist). If the file holds no accounts, you are asked for a
platform (`Discord` or `Test`) and, for Discord, a token, until a login
succeeds. Then the main page is shown, which at present prints only `Todo`.
Choosing `Test` fails with a message, since that platform has no messenger.
The command exits with status 1 if the login file cannot be read or input
ends before a login.

## Using the library

Every platform adaptor is a `recordmsg.messenger.Messenger`. Two messengers
are equal when their platform name and credential are equal. Queries are
coroutines:

```python
import asyncio

from recordmsg.discord import Discord


async def show() -> None:
    discord = Discord("token")
    profile = await discord.get_profile()
    print(profile.username)
    for conversation in await discord.get_conversation():
        print(conversation.name)
        for message in await discord.get_messages(conversation, None):
            print(f"  {message.sender.username}: {message.text}")


asyncio.run(show())
```

`Discord` takes an optional `httpx.AsyncClient` (otherwise it opens one per
call) and a `cache_dir` for guild icons, by default `cache`; icons are
stored as `cache/discord/guilds/<guild id>/imgs/<hash>.webp`. A guild whose
icon cannot be downloaded is still returned, with no icon.

Stored logins are handled by `AuthStore`, which can be used as a context
manager:

```python
from recordmsg.auth import AuthStore
from recordmsg.login import Platform

with AuthStore("LoginInfo") as store:
    store.add_auth(Platform.from_name("Discord").to_messenger("token"))
    store.save_to_disk()
```

`add_auth` skips an account that is already in the store and returns
`False` in that case. New accounts are written to the file only when
`save_to_disk` is called.

If an API request gets a status other than 200, a
`recordmsg.network.HttpStatusError` (a `MessengerError`) is raised; malformed
JSON payloads raise `MessengerError` as well.

## What it does not do

- There is no graphical window; the command is a plain console login prompt.
- The command does not show the chat window. `MessengerWindow` can be built
  with `MessengerWindow.create(store)` and driven from your own code.
- An account entered at the command's login prompt is not written to the
  login file, because the command never calls `save_to_disk`.
- Messages cannot be sent, only read.