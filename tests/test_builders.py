import io
import json

import aiohttp

from cordrest.models import Embed, File
from cordrest.rest.builders import (
    MISSING,
    FormBuilder,
    JSONArrayBuilder,
    JSONBuilder,
    ParamsBuilder,
)


class TestJSONBuilder:
    def test_add_and_build(self):
        builder = JSONBuilder(name="general").add("position", 3)

        assert builder.build() == {"name": "general", "position": 3}

    def test_build_is_a_copy(self):
        builder = JSONBuilder(roles=["1"])
        built = builder.build()
        built["roles"].append("2")

        assert builder.build() == {"roles": ["1"]}

    def test_add_optional_skips_missing_only(self):
        builder = (
            JSONBuilder()
            .add_optional("topic", MISSING)
            .add_optional("nick", None)
            .add_optional("nsfw", False)
        )

        assert builder.build() == {"nick": None, "nsfw": False}

    def test_models_are_serialized(self):
        builder = JSONBuilder().add("embeds", [Embed(title="hi")])

        assert builder.build() == {"embeds": [{"title": "hi"}]}

    def test_truthiness(self):
        assert not JSONBuilder()
        assert JSONBuilder(a=1)


class TestJSONArrayBuilder:
    def test_append(self):
        builder = JSONArrayBuilder({"id": "1", "position": 0})
        builder.append({"id": "2", "position": 1})

        assert builder.build() == [
            {"id": "1", "position": 0},
            {"id": "2", "position": 1},
        ]


class TestParamsBuilder:
    def test_values_are_strings(self):
        params = ParamsBuilder(limit=50, with_counts=True).add("before", 123)

        assert params.build() == {
            "limit": "50",
            "with_counts": "true",
            "before": "123",
        }

    def test_add_optional(self):
        params = (
            ParamsBuilder()
            .add_optional("after", None)
            .add_optional("around", MISSING)
            .add_optional("before", "")
        )

        assert params.build() == {}
        assert not params


class TestFormBuilder:
    def test_add_json(self):
        form = FormBuilder().add_json({"content": "hello"})

        (field,) = form.fields
        assert field["name"] == "payload_json"
        assert field["content_type"] == "application/json"
        assert json.loads(field["value"]) == {"content": "hello"}

    def test_add_file_buffers_streams(self):
        form = FormBuilder().add_file("file", File("a.txt", io.BytesIO(b"abc")))

        (field,) = form.fields
        assert field["value"] == b"abc"
        assert field["filename"] == "a.txt"
        assert field["content_type"] == "application/octet-stream"

    def test_build(self):
        form = FormBuilder().add_json({}).add_field("file", b"data", filename="x.bin")

        assert isinstance(form.build(), aiohttp.FormData)
