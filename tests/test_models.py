"""
Tests for the diff value objects and their serializable schemas.
"""

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from unidiffr.models import Action, Chunk, Diff, DiffSchema, Header


@pytest.fixture
def diff():
    tz = timezone(timedelta(hours=-3))
    header = Header("a/x.py", datetime(2020, 5, 1, 8, 0, tzinfo=tz), "b/x.py", datetime(2020, 5, 2, 9, 30, tzinfo=tz))
    chunk = Chunk(3, 2, 3, 3, ((Action.KEEP, " ctx"), (Action.REMOVE, "old"), (Action.ADD, "new"), (Action.ADD, "")))
    return Diff(header, (chunk,))


class TestAction:

    @pytest.mark.parametrize("prefix, action", [("+", Action.ADD), ("-", Action.REMOVE), (" ", Action.KEEP)])
    def test_prefix_round_trip(self, prefix, action):
        assert Action.from_prefix(prefix) is action
        assert action.prefix == prefix

    @pytest.mark.parametrize("prefix", ["", "*", "++", "\t"])
    def test_unknown_prefix(self, prefix):
        with pytest.raises(ValueError):
            Action.from_prefix(prefix)


class TestValueObjects:

    def test_entities_are_frozen(self, diff):
        with pytest.raises(dataclasses.FrozenInstanceError):
            diff.chunks = ()
        with pytest.raises(dataclasses.FrozenInstanceError):
            diff.header.from_path = "other"
        with pytest.raises(dataclasses.FrozenInstanceError):
            diff.chunks[0].pre_start = 0

    def test_entities_are_hashable(self, diff):
        assert hash(diff) == hash(dataclasses.replace(diff))


class TestDiffSchema:

    def test_from_diff_mirrors_fields(self, diff):
        schema = DiffSchema.from_diff(diff)

        assert schema.header.from_path == "a/x.py"
        assert schema.header.to_timestamp == diff.header.to_timestamp
        assert len(schema.chunks) == 1
        assert schema.chunks[0].pre_start == 3
        assert [(line.action, line.content) for line in schema.chunks[0].lines] == list(diff.chunks[0].lines)

    def test_json_mode_dump(self, diff):
        data = DiffSchema.from_diff(diff).model_dump(mode="json")

        assert data["header"]["from_timestamp"] == "2020-05-01T08:00:00-03:00"
        assert data["chunks"][0]["lines"][0] == {"action": "keep", "content": " ctx"}
        assert data["chunks"][0]["lines"][3] == {"action": "add", "content": ""}
