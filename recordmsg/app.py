"""The application: routes messages between pages and runs the console front end."""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, Union
import os

from recordmsg.auth import AuthStore
from recordmsg.chat import ChatPageMessage
from recordmsg.login import (
    Login,
    LoginAction,
    LoginError,
    LoginPageMessage,
    LoginView,
    NoAction,
    Platform,
    PlatformInput,
    RunAction,
    SubmitToken,
    TokenInput,
)
from recordmsg.messenger import MessengerError

DEFAULT_AUTH_PATH = Path("./LoginInfo")
TITLE = "record"
TODO_TEXT = "Todo"


@dataclass(frozen=True)
class LoginMessage:
    """A message for the login page."""

    message: LoginPageMessage


@dataclass(frozen=True)
class ChatMessage:
    """A message for the chat page."""

    message: ChatPageMessage


AppMessage = Union[LoginMessage, ChatMessage]
AppTask = Callable[[], Awaitable[AppMessage]]


class PageKind(Enum):
    """Which page the application shows."""

    LOGIN = "login"
    TODO = "todo"


def _map_login(task: Callable[[], Awaitable[LoginPageMessage]]) -> AppTask:
    async def run() -> AppMessage:
        return LoginMessage(await task())

    return run


class App:
    """Top-level application state."""

    def __init__(self, auth_path: Union[str, os.PathLike] = DEFAULT_AUTH_PATH) -> None:
        self.auth_store = AuthStore(auth_path)
        if self.auth_store.is_empty():
            self._login: Optional[Login] = Login()
            self._page = PageKind.LOGIN
        else:
            self._login = None
            self._page = PageKind.TODO

    @property
    def page(self) -> PageKind:
        return self._page

    def title(self) -> str:
        return TITLE

    def update(self, message: AppMessage) -> Optional[AppTask]:
        """Handle ``message``; return a task to run, whose result is fed back."""
        match message:
            case LoginMessage(message=inner):
                if self._login is None:
                    return None
                match self._login.update(inner):
                    case NoAction():
                        return None
                    case LoginAction(messenger=messenger):
                        self.auth_store.add_auth(messenger)
                        self._login = None
                        self._page = PageKind.TODO
                        return None
                    case RunAction(task=task):
                        return _map_login(task)
            case ChatMessage():
                return None
        raise TypeError(f"unexpected message: {message!r}")

    def view(self) -> Union[LoginView, str]:
        """What the current page shows."""
        if self._login is not None:
            return self._login.view()
        return TODO_TEXT


def _dispatch(app: App, message: AppMessage) -> None:
    task = app.update(message)
    while task is not None:
        try:
            message = asyncio.run(task())
        except MessengerError as exc:
            print(f"Login failed: {exc}", file=sys.stderr)
            message = LoginMessage(LoginError(str(exc)))
        task = app.update(message)


def _login_loop(app: App) -> bool:
    while app.page is PageKind.LOGIN:
        view = app.view()
        assert isinstance(view, LoginView)
        print(view.title)
        print("Platforms: " + ", ".join(str(p) for p in view.platforms))
        try:
            platform_name = input("Platform: ").strip()
        except EOFError:
            return False
        try:
            platform = Platform.from_name(platform_name)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            continue
        _dispatch(app, LoginMessage(PlatformInput(platform)))

        current = app.view()
        if isinstance(current, LoginView) and current.token_field is not None:
            try:
                token = input("Token: ")
            except EOFError:
                return False
            _dispatch(app, LoginMessage(TokenInput(token)))
        _dispatch(app, LoginMessage(SubmitToken()))
    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Start the application on the console."""
    parser = argparse.ArgumentParser(prog=TITLE, description="Multi-platform chat client.")
    parser.add_argument(
        "--auth-file",
        default=str(DEFAULT_AUTH_PATH),
        help="file holding platform:token lines",
    )
    args = parser.parse_args(argv)

    print("Starting")
    try:
        app = App(args.auth_file)
    except (OSError, ValueError, MessengerError) as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        print(app.title())
        if not _login_loop(app):
            print(file=sys.stderr)
            print("Login aborted", file=sys.stderr)
            return 1
        print(app.view())
        return 0
    finally:
        app.auth_store.close()


if __name__ == "__main__":
    sys.exit(main())