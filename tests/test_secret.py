import pytest

from ina.secret import (
    SecretError,
    development_channel_id,
    development_guild_id,
    discord_token,
    encryption_key,
)


def test_discord_token_present(monkeypatch):
    monkeypatch.setenv("DISCORD_TOKEN", "token")
    assert discord_token() == "token"


def test_encryption_key_present(monkeypatch):
    monkeypatch.setenv("ENCRYPTION_KEY", "secret")
    assert encryption_key() == "secret"


@pytest.mark.parametrize(
    "name, func",
    [
        ("DISCORD_TOKEN", discord_token),
        ("ENCRYPTION_KEY", encryption_key),
        ("DEVELOPMENT_GUILD_ID", development_guild_id),
        ("DEVELOPMENT_CHANNEL_ID", development_channel_id),
    ],
)
def test_missing_variable_raises(monkeypatch, name, func):
    monkeypatch.delenv(name, raising=False)
    with pytest.raises(SecretError):
        func()


def test_guild_id_parsed(monkeypatch):
    monkeypatch.setenv("DEVELOPMENT_GUILD_ID", "123456789")
    assert development_guild_id() == 123456789


def test_channel_id_parsed(monkeypatch):
    monkeypatch.setenv("DEVELOPMENT_CHANNEL_ID", "18446744073709551615")
    assert development_channel_id() == 18446744073709551615


@pytest.mark.parametrize("value", ["0", "abc", "-5", "", " 12", "18446744073709551616"])
def test_invalid_ids_raise(monkeypatch, value):
    monkeypatch.setenv("DEVELOPMENT_GUILD_ID", value)
    with pytest.raises(SecretError):
        development_guild_id()