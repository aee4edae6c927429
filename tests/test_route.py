from cordrest.rest.route import BASE_URL, Route


class TestRoute:
    def test_endpoint_interpolates_params(self):
        route = Route(
            "get",
            "/channels/{channel_id}/messages/{message_id}",
            channel_id=1,
            message_id="2",
        )

        assert route.method == "GET"
        assert route.endpoint == "/channels/1/messages/2"
        assert route.url() == BASE_URL + "/channels/1/messages/2"

    def test_url_with_custom_base(self):
        route = Route("GET", "/guilds/{guild_id}", guild_id=5)

        assert route.url("http://localhost:8080/api/") == "http://localhost:8080/api/guilds/5"

    def test_emoji_is_percent_encoded(self):
        route = Route(
            "PUT",
            "/channels/{channel_id}/messages/{message_id}/reactions/{emoji}/@me",
            channel_id=1,
            message_id=2,
            emoji="blob:123",
        )

        assert route.endpoint == "/channels/1/messages/2/reactions/blob%3A123/@me"

        unicode = Route("GET", "/x/{emoji}", emoji="🔥")
        assert unicode.endpoint == "/x/%F0%9F%94%A5"

    def test_bucket_keeps_major_parameters(self):
        route = Route(
            "DELETE",
            "/channels/{channel_id}/messages/{message_id}/reactions/{emoji}/{user_id}",
            channel_id=10,
            message_id=20,
            emoji="🔥",
            user_id=30,
        )

        assert (
            route.bucket
            == "DELETE /channels/10/messages/{message_id}/reactions/{emoji}/{user_id}"
        )

    def test_bucket_is_shared_across_minor_ids(self):
        path = "/channels/{channel_id}/messages/{message_id}"
        first = Route("GET", path, channel_id=1, message_id=100)
        second = Route("GET", path, channel_id=1, message_id=200)
        other_channel = Route("GET", path, channel_id=2, message_id=100)

        assert first.bucket == second.bucket
        assert first.bucket != other_channel.bucket

    def test_bucket_depends_on_method(self):
        path = "/channels/{channel_id}"

        assert Route("GET", path, channel_id=1).bucket != Route(
            "PATCH", path, channel_id=1
        ).bucket

    def test_major_params(self):
        route = Route(
            "PUT",
            "/guilds/{guild_id}/members/{user_id}/roles/{role_id}",
            guild_id=1,
            user_id=2,
            role_id=3,
        )

        assert route.major_params == {"guild_id": "1"}
        assert route.bucket == "PUT /guilds/1/members/{user_id}/roles/{role_id}"

    def test_route_without_params(self):
        route = Route("POST", "/guilds")

        assert route.endpoint == "/guilds"
        assert route.bucket == "POST /guilds"
