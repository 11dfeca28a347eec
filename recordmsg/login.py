"""Login page: choosing a platform and entering credentials."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional, Tuple, Union

from recordmsg.discord import Discord
from recordmsg.messenger import Messenger, MessengerError

logger = logging.getLogger(__name__)

LOGIN_WIDTH = 360.0


class LoginMethod(Enum):
    """Ways a platform lets a user log in."""

    TOKEN = "token"
    UNKNOWN = "unknown"


class Platform(Enum):
    """Messaging platforms that can be logged into."""

    DISCORD = "Discord"
    TEST = "Test"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Platform":
        """Platform whose display name is exactly ``name``."""
        for platform in cls:
            if platform.value == name:
                return platform
        raise ValueError(f"unknown platform: {name!r}")

    def to_messenger(self, auth: str) -> Messenger:
        """A messenger for this platform that uses ``auth`` as its credential."""
        if self is Platform.DISCORD:
            return Discord(auth)
        raise MessengerError(f"platform {self.value} has no messenger")

    def login_methods(self) -> Tuple[LoginMethod, ...]:
        """Login methods this platform supports."""
        if self is Platform.DISCORD:
            return (LoginMethod.TOKEN,)
        return (LoginMethod.UNKNOWN,)


# === Messages the page reacts to ===


@dataclass(frozen=True)
class PlatformInput:
    platform: Platform


@dataclass(frozen=True)
class TokenInput:
    text: str


@dataclass(frozen=True)
class SubmitToken:
    pass


@dataclass(frozen=True)
class LoginSuccess:
    messenger: Messenger


@dataclass(frozen=True)
class LoginError:
    error: str


LoginPageMessage = Union[PlatformInput, TokenInput, SubmitToken, LoginSuccess, LoginError]


# === Actions the page asks its owner to perform ===


@dataclass(frozen=True)
class LoginAction:
    """The user logged in with ``messenger``."""

    messenger: Messenger


@dataclass(frozen=True)
class RunAction:
    """Run ``task`` and feed the message it produces back to the page."""

    task: Callable[[], Awaitable[LoginPageMessage]]


@dataclass(frozen=True)
class NoAction:
    """Nothing to do."""


LoginPageAction = Union[LoginAction, RunAction, NoAction]


@dataclass(frozen=True)
class LoginView:
    """What the login page shows."""

    title: str
    platforms: Tuple[Platform, ...]
    selected_platform: Platform
    token_field: Optional[str]
    submit_label: str
    width: float


class Login:
    """State of the login page."""

    def __init__(self) -> None:
        self._platforms: Tuple[Platform, ...] = (Platform.DISCORD, Platform.TEST)
        self._selected_platform = Platform.TEST
        self._token = ""
        self._error: Optional[str] = None

    @property
    def error(self) -> Optional[str]:
        """The last login error, if any."""
        return self._error

    def update(self, message: LoginPageMessage) -> LoginPageAction:
        """React to ``message`` and tell the caller what to do next."""
        match message:
            case PlatformInput(platform=platform):
                logger.debug("%r", platform)
                self._selected_platform = platform
            case TokenInput(text=text):
                self._token = text
            case SubmitToken():
                platform = self._selected_platform
                token = self._token

                async def submit() -> LoginPageMessage:
                    return LoginSuccess(platform.to_messenger(token))

                return RunAction(submit)
            case LoginSuccess(messenger=messenger):
                return LoginAction(messenger)
            case LoginError(error=error):
                self._error = error
            case _:
                raise TypeError(f"unexpected login message: {message!r}")
        return NoAction()

    def view(self) -> LoginView:
        """Describe the page as it should be shown now."""
        methods = self._selected_platform.login_methods()
        token_field = self._token if LoginMethod.TOKEN in methods else None
        return LoginView(
            title="Login",
            platforms=self._platforms,
            selected_platform=self._selected_platform,
            token_field=token_field,
            submit_label="Submit",
            width=LOGIN_WIDTH,
        )