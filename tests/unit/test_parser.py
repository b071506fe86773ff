"""Unit tests for RecordParser."""

import json

import pytest

from vidmeta_client.parser import RecordParser, parse_records, parse_subprocess_line
from vidmeta_client.types import VideoRecord

from helpers import mirror_item, ytdlp_line


@pytest.fixture
def parser() -> RecordParser:
    return RecordParser()


class TestParseRecords:
    """Test mirror-shaped array parsing."""

    def test_parses_all_complete_items(self, parser):
        """Every item with title, videoId and lengthSeconds becomes a record."""
        raw = json.dumps([mirror_item("A", "id-a", 10), mirror_item("B", "id-b", 0)])

        records = parser.parse_records(raw)

        assert records == [
            VideoRecord(title="A", length_seconds=10, video_id="id-a"),
            VideoRecord(title="B", length_seconds=0, video_id="id-b"),
        ]

    def test_length_matches_count_of_complete_items(self, parser):
        """Items missing any required field are dropped individually."""
        items = [
            mirror_item("A", "id-a", 10),
            {"title": "no length", "videoId": "id-x"},
            {"videoId": "id-y", "lengthSeconds": 3},
            {"title": "no id", "lengthSeconds": 3},
            mirror_item("B", "id-b", 99),
        ]

        records = parser.parse_records(json.dumps(items))

        assert [r.video_id for r in records] == ["id-a", "id-b"]

    @pytest.mark.parametrize("length", [-1, 1.5, "120", True, None])
    def test_rejects_non_unsigned_length(self, parser, length):
        """lengthSeconds must be a non-negative integer."""
        raw = json.dumps([mirror_item("A", "id-a", length)])

        assert parser.parse_records(raw) == []

    def test_non_object_items_dropped(self, parser):
        """Scalars and nested arrays inside the top-level array are skipped."""
        raw = json.dumps(["text", 5, [1, 2], mirror_item("A", "id-a")])

        records = parser.parse_records(raw)

        assert len(records) == 1

    def test_empty_array_is_success(self, parser):
        """An empty array is an empty result, not a failure."""
        assert parser.parse_records("[]") == []

    @pytest.mark.parametrize("raw", ['{"title": "x"}', '"string"', "42", "null"])
    def test_non_array_top_level_is_none(self, parser, raw):
        """A non-array top-level value is a total failure."""
        assert parser.parse_records(raw) is None

    @pytest.mark.parametrize("raw", ["", "not json", "[1, 2", b"\xff\xfe"])
    def test_malformed_json_is_none(self, parser, raw):
        """Malformed input is a total failure."""
        assert parser.parse_records(raw) is None

    def test_accepts_bytes(self, parser):
        """Raw bytes are decoded as JSON."""
        raw = json.dumps([mirror_item("A", "id-a", 1)]).encode()

        assert len(parser.parse_records(raw)) == 1

    def test_module_level_helper(self):
        """parse_records uses a default parser."""
        assert parse_records(json.dumps([mirror_item("A", "id-a", 1)]))[0].title == "A"


class TestParseSubprocessLine:
    """Test search tool line parsing."""

    def test_parses_decoded_object(self, parser):
        """A decoded object with id, title and duration parses."""
        record = parser.parse_subprocess_line({"id": "abc", "title": "T", "duration": 42})

        assert record == VideoRecord(title="T", length_seconds=42, video_id="abc")

    def test_missing_duration_defaults_to_zero(self, parser):
        """Absent duration yields 0."""
        record = parser.parse_subprocess_line({"id": "abc", "title": "T"})

        assert record.length_seconds == 0

    @pytest.mark.parametrize("duration", [None, "long", True, -5, float("nan")])
    def test_unusable_duration_defaults_to_zero(self, parser, duration):
        """Null, non-numeric, boolean, negative or NaN durations yield 0."""
        record = parser.parse_subprocess_line({"id": "abc", "title": "T", "duration": duration})

        assert record.length_seconds == 0

    def test_float_duration_truncated(self, parser):
        """Fractional durations are truncated to whole seconds."""
        record = parser.parse_subprocess_line({"id": "abc", "title": "T", "duration": 213.9})

        assert record.length_seconds == 213

    def test_parses_raw_line(self, parser):
        """Raw JSON text is decoded first."""
        record = parser.parse_subprocess_line(ytdlp_line("T", "abc", 7))

        assert record.video_id == "abc"
        assert record.length_seconds == 7

    @pytest.mark.parametrize(
        "value",
        [{"title": "T"}, {"id": "abc"}, {"id": 5, "title": "T"}, "not json", "[1]", 3],
    )
    def test_incomplete_or_malformed_is_none(self, parser, value):
        """Missing id/title or malformed input yields None."""
        assert parser.parse_subprocess_line(value) is None

    def test_module_level_helper(self):
        """parse_subprocess_line uses a default parser."""
        assert parse_subprocess_line({"id": "x", "title": "y"}).length_seconds == 0


class TestParseSubprocessOutput:
    """Test whole-output parsing."""

    def test_skips_blank_and_malformed_lines(self, parser):
        """Bad lines are skipped without failing the batch."""
        lines = [ytdlp_line("A", "a"), "", "   ", "{broken", ytdlp_line("B", "b", None)]

        records = parser.parse_subprocess_output(lines)

        assert [r.video_id for r in records] == ["a", "b"]
        assert records[1].length_seconds == 0

    def test_preserves_order(self, parser):
        """Records keep the tool's output order."""
        lines = [ytdlp_line(f"T{i}", f"id{i}") for i in range(5)]

        records = parser.parse_subprocess_output(lines)

        assert [r.video_id for r in records] == [f"id{i}" for i in range(5)]
