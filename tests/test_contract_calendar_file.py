from __future__ import annotations

import datetime as dt
import json
import tempfile
import unittest
from pathlib import Path

from calgrid.calendar_file import decode_calendar, dump_calendar, load_calendar, load_calendar_text
from calgrid.errors import CalendarFileError, CalendarValidationError, CalgridError
from calgrid.model import Certainty, Event
from calgrid.validate import validate_calendar

GOOD = [
    {"title": "Trip", "start": "2024-01-01", "end": "2024-01-03", "certainty": "Sure"},
    {"title": "Maybe", "start": "2024-01-02", "end": "2024-01-02", "certainty": "Possible", "note": "extra keys ok"},
]


class TestCalendarFileContract(unittest.TestCase):
    def test_decode_good_calendar(self) -> None:
        events = decode_calendar(GOOD)
        self.assertEqual(
            events,
            [
                Event("Trip", dt.date(2024, 1, 1), dt.date(2024, 1, 3), Certainty.SURE),
                Event("Maybe", dt.date(2024, 1, 2), dt.date(2024, 1, 2), Certainty.POSSIBLE),
            ],
        )

    def test_empty_array_is_valid(self) -> None:
        self.assertEqual(load_calendar_text("[]"), [])

    def test_end_before_start_is_not_a_decode_error(self) -> None:
        events = decode_calendar([{"title": "x", "start": "2024-01-05", "end": "2024-01-01", "certainty": "Sure"}])
        self.assertEqual(events[0].end, dt.date(2024, 1, 1))

    def test_load_from_file_roundtrip(self) -> None:
        events = decode_calendar(GOOD)
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "cal.json"
            p.write_text(dump_calendar(events), encoding="utf-8")
            self.assertEqual(load_calendar(p), events)
            self.assertEqual(load_calendar(str(p)), events)

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(CalendarFileError) as ctx:
                load_calendar(Path(td) / "nope.json")
        self.assertIsInstance(ctx.exception, CalgridError)
        self.assertIn("cannot read", str(ctx.exception))

    def test_not_json(self) -> None:
        with self.assertRaises(CalendarValidationError) as ctx:
            load_calendar_text("{not json")
        self.assertIn("not valid JSON", str(ctx.exception))

    def test_top_level_must_be_array(self) -> None:
        with self.assertRaises(CalendarValidationError) as ctx:
            load_calendar_text(json.dumps({"events": GOOD}))
        self.assertIn("must be a JSON array", str(ctx.exception))

    def test_missing_field(self) -> None:
        with self.assertRaises(CalendarValidationError) as ctx:
            decode_calendar([{"title": "x", "start": "2024-01-01", "certainty": "Sure"}])
        self.assertEqual(str(ctx.exception), "calendar[0] missing field: end")

    def test_bad_date(self) -> None:
        with self.assertRaises(CalendarValidationError) as ctx:
            decode_calendar([GOOD[0], {"title": "x", "start": "2024-02-30", "end": "2024-03-01", "certainty": "Sure"}])
        self.assertIn("calendar[1].start must be YYYY-MM-DD", str(ctx.exception))

    def test_bad_certainty(self) -> None:
        with self.assertRaises(CalendarValidationError) as ctx:
            decode_calendar([{"title": "x", "start": "2024-01-01", "end": "2024-01-01", "certainty": "Maybe"}])
        self.assertIn("certainty must be one of Sure, Possible", str(ctx.exception))

    def test_deeply_nested_json(self) -> None:
        with self.assertRaises(CalendarValidationError) as ctx:
            load_calendar_text("[" * 200000)
        self.assertIn("not valid JSON", str(ctx.exception))

    def test_title_must_encode_as_utf8(self) -> None:
        text = json.dumps([{"title": "ok \ud800", "start": "2024-01-01", "end": "2024-01-01", "certainty": "Sure"}])
        with self.assertRaises(CalendarValidationError) as ctx:
            load_calendar_text(text)
        self.assertEqual(str(ctx.exception), "calendar[0].title must be valid UTF-8")

        # Properly paired surrogates decode to a real character.
        events = load_calendar_text(text.replace("\\ud800", "\\ud83d\\ude00"))
        self.assertEqual(events[0].title, "ok \U0001F600")

    def test_validate_collects_all_errors(self) -> None:
        errs = validate_calendar([
            "not an object",
            {"title": 3, "start": "x", "end": "2024-01-01", "certainty": "Sure"},
            GOOD[0],
        ])
        self.assertEqual(errs[0], "calendar[0] must be an object")
        self.assertIn("calendar[1].title must be string", errs)
        self.assertTrue(any(e.startswith("calendar[1].start") for e in errs))
        self.assertEqual(len(errs), 3)


if __name__ == "__main__":
    unittest.main(verbosity=2)
