import pytest

from recordmsg.discord import Discord
from recordmsg.login import (
    Login,
    LoginAction,
    LoginError,
    LoginMethod,
    LoginSuccess,
    NoAction,
    Platform,
    PlatformInput,
    RunAction,
    SubmitToken,
    TokenInput,
)
from recordmsg.messenger import MessengerError


def test_from_name_known_platforms():
    assert Platform.from_name("Discord") is Platform.DISCORD
    assert Platform.from_name("Test") is Platform.TEST


def test_from_name_is_case_sensitive():
    with pytest.raises(ValueError):
        Platform.from_name("discord")


def test_str_round_trips_through_from_name():
    for platform in Platform:
        assert Platform.from_name(str(platform)) is platform


def test_discord_to_messenger_uses_token():
    messenger = Platform.DISCORD.to_messenger("token")
    assert messenger.name() == "Discord"
    assert messenger.auth() == "token"


def test_test_platform_has_no_messenger():
    with pytest.raises(MessengerError):
        Platform.TEST.to_messenger("token")


def test_login_methods():
    assert Platform.DISCORD.login_methods() == (LoginMethod.TOKEN,)
    assert Platform.TEST.login_methods() == (LoginMethod.UNKNOWN,)


def test_initial_view():
    view = Login().view()
    assert view.title == "Login"
    assert view.selected_platform is Platform.TEST
    assert view.platforms == (Platform.DISCORD, Platform.TEST)
    assert view.token_field is None
    assert view.submit_label == "Submit"
    assert view.width == 360.0


def test_platform_input_shows_token_field():
    login = Login()
    assert login.update(PlatformInput(Platform.DISCORD)) == NoAction()
    view = login.view()
    assert view.selected_platform is Platform.DISCORD
    assert view.token_field == ""


def test_token_input_is_reflected_in_view():
    login = Login()
    login.update(PlatformInput(Platform.DISCORD))
    assert login.update(TokenInput("token")) == NoAction()
    assert login.view().token_field == "token"


@pytest.mark.asyncio
async def test_submit_produces_login_success():
    login = Login()
    login.update(PlatformInput(Platform.DISCORD))
    login.update(TokenInput("token"))
    action = login.update(SubmitToken())
    assert isinstance(action, RunAction)
    result = await action.task()
    assert isinstance(result, LoginSuccess)
    assert result.messenger == Discord("token")


@pytest.mark.asyncio
async def test_submit_on_test_platform_fails():
    login = Login()
    action = login.update(SubmitToken())
    assert isinstance(action, RunAction)
    with pytest.raises(MessengerError):
        await action.task()


def test_login_success_becomes_login_action():
    messenger = Discord("token")
    action = Login().update(LoginSuccess(messenger))
    assert action == LoginAction(messenger)


def test_login_error_is_stored():
    login = Login()
    assert login.error is None
    assert login.update(LoginError("Invalid token")) == NoAction()
    assert login.error == "Invalid token"