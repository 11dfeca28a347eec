import pytest

from recordmsg.auth import AuthStore
from recordmsg.discord import Discord
from recordmsg.messenger import MessengerError


def test_missing_file_is_created_empty(tmp_path):
    path = tmp_path / "LoginInfo"
    with AuthStore(path) as store:
        assert store.is_empty()
        assert store.messengers() == ()
    assert path.exists()
    assert path.read_text() == ""


def test_loads_entries(tmp_path):
    path = tmp_path / "LoginInfo"
    path.write_text("Discord:token\n")
    with AuthStore(path) as store:
        entries = store.messengers()
        assert len(entries) == 1
        assert entries[0].auth == Discord("token")
        assert entries[0].save_to_disk is True
        assert not store.is_empty()


def test_lines_without_separator_are_skipped(tmp_path):
    path = tmp_path / "LoginInfo"
    path.write_text("garbage\nDiscord:token\n\n")
    with AuthStore(path) as store:
        assert [e.auth.auth() for e in store.messengers()] == ["token"]


def test_token_keeps_later_colons(tmp_path):
    path = tmp_path / "LoginInfo"
    path.write_text("Discord:token:secret\n")
    with AuthStore(path) as store:
        assert store.messengers()[0].auth.auth() == "token:secret"


def test_unknown_platform_raises(tmp_path):
    path = tmp_path / "LoginInfo"
    path.write_text("Nowhere:token\n")
    with pytest.raises(ValueError):
        AuthStore(path)


def test_test_platform_raises(tmp_path):
    path = tmp_path / "LoginInfo"
    path.write_text("Test:token\n")
    with pytest.raises(MessengerError):
        AuthStore(path)


def test_add_auth_rejects_duplicates(tmp_path):
    with AuthStore(tmp_path / "LoginInfo") as store:
        assert store.add_auth(Discord("token")) is True
        assert store.add_auth(Discord("token")) is False
        assert len(store.messengers()) == 1
        assert store.contains_auth(Discord("token"))
        assert not store.contains_auth(Discord("secret"))


def test_added_auth_not_saved_until_requested(tmp_path):
    path = tmp_path / "LoginInfo"
    with AuthStore(path) as store:
        store.add_auth(Discord("token"))
        assert store.messengers()[0].save_to_disk is False
        assert path.read_text() == ""
        store.save_to_disk()
        assert store.messengers()[0].save_to_disk is True
        assert path.read_text() == "Discord:token\n"


def test_save_round_trip(tmp_path):
    path = tmp_path / "LoginInfo"
    with AuthStore(path) as store:
        store.add_auth(Discord("token"))
        store.add_auth(Discord("secret"))
        store.save_to_disk()
    with AuthStore(path) as reopened:
        assert [e.auth for e in reopened.messengers()] == [
            Discord("token"),
            Discord("secret"),
        ]


def test_save_rewrites_file_without_garbage(tmp_path):
    path = tmp_path / "LoginInfo"
    path.write_text("garbage line\nDiscord:token\n")
    with AuthStore(path) as store:
        store.save_to_disk()
    assert path.read_text() == "Discord:token\n"