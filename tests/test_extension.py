from datetime import timedelta

import pytest

from ina.custom_id import CustomId
from ina.extension import (
    DISCORD_EPOCH,
    Guild,
    ImageHash,
    InteractionLabel,
    InteractionType,
    Member,
    PartialMember,
    User,
    UserNameDisplay,
    UserTagDisplay,
    creation_date,
)

STATIC_HASH = "0123456789abcdef0123456789abcdef"
ANIMATED_HASH = "a_" + STATIC_HASH


def test_image_hash_round_trip_static():
    parsed = ImageHash.parse(STATIC_HASH)
    assert str(parsed) == STATIC_HASH
    assert parsed.is_animated() is False


def test_image_hash_round_trip_animated():
    parsed = ImageHash.parse(ANIMATED_HASH)
    assert str(parsed) == ANIMATED_HASH
    assert parsed.is_animated() is True


def test_image_hash_uppercase_normalised():
    assert str(ImageHash.parse(STATIC_HASH.upper())) == STATIC_HASH


@pytest.mark.parametrize("bad", ["", "abc", STATIC_HASH + "0", "zz" + STATIC_HASH[2:], "b_" + STATIC_HASH])
def test_image_hash_invalid(bad):
    with pytest.raises(ValueError):
        ImageHash.parse(bad)


def test_creation_date_epoch():
    assert creation_date(1) == DISCORD_EPOCH


def test_creation_date_offset():
    assert creation_date(1000 << 22) == DISCORD_EPOCH + timedelta(milliseconds=1000)


def test_creation_date_documented_example():
    created = creation_date(175928847299117063)
    assert created.isoformat() == "2016-04-30T11:18:25.796000+00:00"


@pytest.mark.parametrize("bad", [0, -1, 1 << 64])
def test_creation_date_rejects_invalid(bad):
    with pytest.raises(ValueError):
        creation_date(bad)


def test_label_command():
    label = InteractionLabel(InteractionType.APPLICATION_COMMAND, 5, command_name="ping", author_id=7)
    assert str(label) == "<command:ping:5:7>"


def test_label_component_with_custom_id():
    custom_id = str(CustomId("cmd", "var").with_str("data"))
    label = InteractionLabel(InteractionType.MESSAGE_COMPONENT, 5, custom_id=custom_id)
    assert str(label) == "<component:cmd:var:5>"


def test_label_modal_invalid_custom_id():
    label = InteractionLabel(InteractionType.MODAL_SUBMIT, 5, custom_id="no separators", author_id=9)
    assert str(label) == "<modal:5:9>"


def test_label_unknown_kind():
    assert str(InteractionLabel(99, 5)) == "<unknown:5>"


def test_label_other_kinds():
    assert str(InteractionLabel(InteractionType.PING, 1)) == "<ping:1>"
    assert str(InteractionLabel(InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE, 1, command_name="x")) == (
        "<autocomplete:x:1>"
    )


def test_name_display_precedence():
    assert str(UserNameDisplay("nick", "name", "user")) == "nick"
    assert str(UserNameDisplay(None, "name", "user")) == "name"
    assert str(UserNameDisplay(None, None, "user")) == "user"


def test_tag_display():
    assert str(UserTagDisplay("alice", 42)) == "alice#0042"
    assert str(UserTagDisplay("alice", None)) == "@alice"


def test_user_display():
    user = User(1, "alice", discriminator=0, global_name="Alice")
    assert str(user.display_name()) == "Alice"
    assert str(user.display_tag()) == "@alice"
    assert str(User(1, "bob").display_name()) == "bob"


def test_user_hashes():
    avatar = ImageHash.parse(STATIC_HASH)
    banner = ImageHash.parse(ANIMATED_HASH)
    user = User(1, "alice", avatar=avatar, banner=banner)
    assert user.icon_hash() == avatar
    assert user.banner_hash() == banner


def test_member_prefers_nick_and_guild_avatar():
    user_avatar = ImageHash.parse(STATIC_HASH)
    member_avatar = ImageHash.parse(ANIMATED_HASH)
    user = User(1, "alice", discriminator=7, global_name="Alice", avatar=user_avatar)
    member = Member(user, nick="Ally", avatar=member_avatar)
    assert str(member.display_name()) == "Ally"
    assert member.display_tag() == user.display_tag()
    assert member.icon_hash() == member_avatar
    assert Member(user).icon_hash() == user_avatar
    assert str(Member(user).display_name()) == "Alice"


def test_partial_member_without_user():
    member = PartialMember(nick=None)
    assert str(member.display_name()) == "unknown"
    assert str(member.display_tag()) == "@unknown"
    assert member.icon_hash() is None
    assert member.banner_hash() is None


def test_partial_member_with_user():
    banner = ImageHash.parse(STATIC_HASH)
    avatar = ImageHash.parse(ANIMATED_HASH)
    user = User(2, "bob", global_name="Bob", avatar=avatar, banner=banner)
    member = PartialMember(user)
    assert str(member.display_name()) == "Bob"
    assert member.icon_hash() == avatar
    assert member.banner_hash() == banner
    assert str(PartialMember(user, nick="B").display_name()) == "B"


def test_guild_icon_hash():
    icon = ImageHash.parse(STATIC_HASH)
    assert Guild(3, "guild", icon).icon_hash() == icon
    assert Guild(3, "guild").icon_hash() is None