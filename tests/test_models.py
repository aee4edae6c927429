import datetime
import io

from cordrest.models import (
    Ban,
    Channel,
    Embed,
    EmbedField,
    EmbedFooter,
    File,
    GuildMember,
    Invite,
    Message,
    ReactionEmoji,
    User,
)

from .conftest import CHANNEL, INVITE, MEMBER, MESSAGE, USER


class TestMessage:
    def test_from_json(self):
        message = Message.from_json(MESSAGE)

        assert message.id == "334385199974967042"
        assert isinstance(message.author, User)
        assert message.author.username == "Nelly"
        assert message.timestamp == datetime.datetime(
            2017, 7, 11, 17, 27, 7, 299000, tzinfo=datetime.timezone.utc
        )
        assert message.edited_timestamp is None
        assert message.reactions[0].count == 1
        assert message.reactions[0].emoji.name == "🔥"
        assert not message.is_webhook

    def test_webhook_message(self):
        message = Message.from_json({**MESSAGE, "webhook_id": "1234"})

        assert message.is_webhook

    def test_unknown_keys_are_ignored(self):
        message = Message.from_json({**MESSAGE, "flags": 4, "components": []})

        assert message.content == "Supa Hot"

    def test_from_json_passes_instances_through(self):
        message = Message.from_json(MESSAGE)

        assert Message.from_json(message) is message


class TestChannel:
    def test_guild_channel(self):
        channel = Channel.from_json(CHANNEL)

        assert not channel.is_direct_message
        assert channel.recipient is None
        assert channel.permission_overwrites[0].allow == "1024"
        assert channel.mention == "<#41771983423143937>"

    def test_direct_message_channel(self):
        channel = Channel.from_json(
            {"id": "319674150115610528", "type": 1, "recipients": [USER]}
        )

        assert channel.is_direct_message
        assert channel.recipient.id == USER["id"]

    def test_to_json_omits_unset_fields(self):
        channel = Channel(id="1", name="general")

        assert channel.to_json() == {"id": "1", "name": "general"}


class TestEmbed:
    def test_to_json(self):
        embed = Embed(
            title="Release",
            timestamp=datetime.datetime(2020, 1, 1, tzinfo=datetime.timezone.utc),
            footer=EmbedFooter(text="v1"),
        ).add_field("Changes", "many", inline=True)

        assert embed.to_json() == {
            "title": "Release",
            "timestamp": "2020-01-01T00:00:00+00:00",
            "footer": {"text": "v1"},
            "fields": [{"name": "Changes", "value": "many", "inline": True}],
        }

    def test_from_json_nests_parts(self):
        embed = Embed.from_json(
            {
                "title": "t",
                "image": {"url": "https://x/y.png", "width": 10},
                "fields": [{"name": "a", "value": "b"}],
                "timestamp": "2020-01-01T00:00:00Z",
            }
        )

        assert embed.image.width == 10
        assert embed.fields == [EmbedField(name="a", value="b")]
        assert embed.timestamp.tzinfo is not None


class TestReactionEmoji:
    def test_unicode_path(self):
        assert ReactionEmoji(name="🔥").path == "🔥"

    def test_custom_path(self):
        assert ReactionEmoji(id="41771983429993937", name="LUL").path == "LUL:41771983429993937"


class TestGuildModels:
    def test_member(self):
        member = GuildMember.from_json(MEMBER)

        assert member.user.id == USER["id"]
        assert member.display_name == "NOT API SUPPORT"
        assert member.joined_at.year == 2015

    def test_member_without_nick(self):
        member = GuildMember.from_json({**MEMBER, "nick": None})

        assert member.display_name == "Nelly"

    def test_ban(self):
        ban = Ban.from_json({"reason": "mentioning b1nzy", "user": USER})

        assert ban.user.username == "Nelly"

    def test_invite(self):
        invite = Invite.from_json(INVITE)

        assert invite.guild.name == "CS:GO Fraggers Only"
        assert invite.channel.name == "illuminati"
        assert invite.url == "https://discord.gg/0vCdhLbwjZZTWZLD"


class TestFile:
    def test_read_bytes(self):
        assert File("a.txt", b"abc").read() == b"abc"

    def test_read_stream(self):
        assert File("a.txt", io.BytesIO(b"abc")).read() == b"abc"

    def test_from_path(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"hello")

        file = File.from_path(str(path))

        assert file.name == "notes.txt"
        assert file.read() == b"hello"
