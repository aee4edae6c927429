import pytest

from cordrest.models import Channel, Invite, Message, Overwrite
from cordrest.rest.ratelimit import MAX_BUCKETS

from .conftest import API_URL, CHANNEL, INVITE, MESSAGE, json_response


@pytest.mark.asyncio
class TestChannels:
    async def test_get(self, api, session):
        session.queue(json_response(CHANNEL))

        channel = await api.channels.get(41771983423143937)

        assert isinstance(channel, Channel)
        assert channel.name == "general"
        assert session.last.method == "GET"
        assert session.last.url == API_URL + "/channels/41771983423143937"

    async def test_modify_sends_only_given_fields(self, api, session):
        session.queue(json_response({**CHANNEL, "topic": None}))

        channel = await api.channels.modify(
            1, name="general", topic=None, reason="clear topic"
        )

        call = session.last
        assert call.method == "PATCH"
        assert call.url == API_URL + "/channels/1"
        assert call.json == {"name": "general", "topic": None}
        assert call.headers["X-Audit-Log-Reason"] == "clear topic"
        assert channel.topic is None

    async def test_modify_overwrites(self, api, session):
        session.queue(json_response(CHANNEL))

        await api.channels.modify(
            1, permission_overwrites=[Overwrite(id="2", type=1, allow=1024)]
        )

        assert session.last.json == {
            "permission_overwrites": [
                {"id": "2", "type": 1, "allow": "1024", "deny": "0"}
            ]
        }

    async def test_delete(self, api, session):
        session.queue(json_response(CHANNEL))

        channel = await api.channels.delete(1)

        assert session.last.method == "DELETE"
        assert channel.id == CHANNEL["id"]

    async def test_edit_permissions(self, api, session):
        await api.channels.edit_permissions(1, 2, type=0, allow=1024, deny=0)

        call = session.last
        assert call.method == "PUT"
        assert call.url == API_URL + "/channels/1/permissions/2"
        assert call.json == {"type": 0, "allow": "1024", "deny": "0"}

    async def test_delete_permission(self, api, session):
        await api.channels.delete_permission(1, 2)

        assert session.last.method == "DELETE"
        assert session.last.url == API_URL + "/channels/1/permissions/2"

    async def test_invites(self, api, session):
        session.queue(json_response([INVITE]), json_response(INVITE))

        invites = await api.channels.get_invites(1)
        invite = await api.channels.create_invite(1, max_age=0, unique=True)

        assert isinstance(invites[0], Invite)
        assert invite.code == INVITE["code"]
        assert session.last.method == "POST"
        assert session.last.url == API_URL + "/channels/1/invites"
        assert session.last.json == {"max_age": 0, "unique": True}

    async def test_trigger_typing(self, api, session):
        result = await api.channels.trigger_typing(1)

        assert result is None
        assert session.last.method == "POST"
        assert session.last.url == API_URL + "/channels/1/typing"

    async def test_typing_in_many_channels_keeps_few_buckets(self, api, session, rest):
        for channel_id in range(2000):
            await api.channels.trigger_typing(channel_id)

        assert len(session.calls) == 2000
        assert len(rest.ratelimiter.buckets) <= MAX_BUCKETS

    async def test_pins(self, api, session):
        session.queue(json_response([MESSAGE]))

        pinned = await api.channels.get_pinned_messages(1)
        await api.channels.pin_message(1, 2)
        await api.channels.unpin_message(1, 2)

        assert isinstance(pinned[0], Message)
        assert [(call.method, call.url) for call in session.calls] == [
            ("GET", API_URL + "/channels/1/pins"),
            ("PUT", API_URL + "/channels/1/pins/2"),
            ("DELETE", API_URL + "/channels/1/pins/2"),
        ]

    async def test_recipients(self, api, session):
        await api.channels.add_recipient(1, 2, access_token="oauth", nick="bob")
        assert session.last.method == "PUT"
        assert session.last.url == API_URL + "/channels/1/recipients/2"
        assert session.last.json == {"access_token": "oauth", "nick": "bob"}

        await api.channels.remove_recipient(1, 2)
        assert session.last.method == "DELETE"
