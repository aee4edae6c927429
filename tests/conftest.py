import json as jsonlib
from typing import Any, List, Mapping, MutableSequence, Optional

import attr
import pytest

from cordrest import API, RateLimiter, RESTClient


@attr.define
class FakeResponse:
    """Stands in for aiohttp.ClientResponse"""

    status: int = 200
    body: Any = None
    headers: Mapping[str, str] = attr.field(factory=dict)

    async def text(self, encoding: str = "utf-8") -> str:
        if self.body is None:
            return ""
        if isinstance(self.body, str):
            return self.body
        return jsonlib.dumps(self.body)

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> bool:
        return False


def json_response(
    body: Any, status: int = 200, headers: Optional[Mapping[str, str]] = None
) -> FakeResponse:
    return FakeResponse(
        status, body, {"Content-Type": "application/json", **(headers or {})}
    )


@attr.define
class Call:
    method: str
    url: str
    kwargs: Mapping[str, Any]

    @property
    def headers(self) -> Mapping[str, str]:
        return self.kwargs["headers"]

    @property
    def json(self) -> Any:
        return self.kwargs.get("json")

    @property
    def params(self) -> Any:
        return self.kwargs.get("params")


@attr.define
class FakeSession:
    """Records every request and answers with the queued responses,
    204 No Content once the queue is empty.
    """

    responses: MutableSequence[FakeResponse] = attr.field(factory=list)
    calls: List[Call] = attr.field(factory=list)

    def queue(self, *responses: FakeResponse) -> None:
        self.responses.extend(responses)

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append(Call(method, url, kwargs))
        if self.responses:
            return self.responses.pop(0)
        return FakeResponse(204)

    @property
    def last(self) -> Call:
        return self.calls[-1]


API_URL = "https://discord.com/api/v10"


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def clock() -> List[float]:
    """Mutable fake time, tests move it with ``clock[0] = ...``"""
    return [100.0]


@pytest.fixture
def rest(session: FakeSession, clock: List[float]) -> RESTClient:
    return RESTClient(
        session=session,
        token="secret-token",
        ratelimiter=RateLimiter(clock=lambda: clock[0]),
    )


@pytest.fixture
def api(rest: RESTClient) -> API:
    return API(rest)


USER = {"id": "80351110224678912", "username": "Nelly", "discriminator": "1337"}

CHANNEL = {
    "id": "41771983423143937",
    "guild_id": "41771983423143937",
    "name": "general",
    "type": 0,
    "position": 6,
    "permission_overwrites": [
        {"id": "41771983423143937", "type": 0, "allow": "1024", "deny": "0"}
    ],
    "topic": "24/7 chat about how to make the bot faster",
    "last_message_id": "155117677105512449",
}

MESSAGE = {
    "id": "334385199974967042",
    "channel_id": "290926798999357250",
    "author": USER,
    "content": "Supa Hot",
    "timestamp": "2017-07-11T17:27:07.299000+00:00",
    "edited_timestamp": None,
    "tts": False,
    "mention_everyone": False,
    "mentions": [],
    "mention_roles": [],
    "attachments": [],
    "embeds": [],
    "reactions": [
        {"count": 1, "me": False, "emoji": {"id": None, "name": "🔥"}}
    ],
    "pinned": False,
    "type": 0,
}

GUILD = {
    "id": "197038439483310086",
    "name": "Discord Testers",
    "icon": "f64c482b807da4f539cff778d174971c",
    "owner_id": "73193882359173120",
    "verification_level": 3,
    "roles": [],
    "emojis": [],
    "features": ["ANIMATED_ICON", "BANNER"],
}

MEMBER = {
    "user": USER,
    "nick": "NOT API SUPPORT",
    "roles": [],
    "joined_at": "2015-04-26T06:26:56.936000+00:00",
    "deaf": False,
    "mute": False,
}

ROLE = {
    "id": "41771983423143936",
    "name": "WE DEM BOYZZ!!!!!!",
    "color": 3447003,
    "hoist": True,
    "position": 1,
    "permissions": "66321471",
    "managed": False,
    "mentionable": False,
}

INVITE = {
    "code": "0vCdhLbwjZZTWZLD",
    "guild": {"id": "165176875973476352", "name": "CS:GO Fraggers Only"},
    "channel": {"id": "165176875973476352", "name": "illuminati", "type": 0},
    "inviter": USER,
    "expires_at": None,
}
