import unittest
import uuid
from datetime import date, datetime
from typing import Final, Optional

from reflectkit import CoercionError, Json, UnknownEnumMemberError, coerce
from tests.models import Named, Status


class CoercionTableTests(unittest.TestCase):
    def test_text_to_enum_by_member_name(self):
        self.assertIs(coerce("BLOCKED", Status), Status.BLOCKED)

    def test_unknown_enum_member_raises(self):
        with self.assertRaises(UnknownEnumMemberError) as ctx:
            coerce("blocked", Status)
        self.assertIsInstance(ctx.exception, CoercionError)
        self.assertIsInstance(ctx.exception.__cause__, KeyError)
        self.assertIn("unknown enum member", str(ctx.exception))

    def test_text_to_datetime(self):
        self.assertEqual(
            coerce("2024-03-01T12:30:45", datetime),
            datetime(2024, 3, 1, 12, 30, 45),
        )

    def test_malformed_datetime_raises(self):
        with self.assertRaises(CoercionError) as ctx:
            coerce("first of march", datetime)
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_text_to_json_is_verbatim(self):
        wrapped = coerce('{"a": [1, 2', Json)

        self.assertEqual(wrapped, Json('{"a": [1, 2'))
        self.assertEqual(str(wrapped), '{"a": [1, 2')

    def test_json_loads_on_demand(self):
        self.assertEqual(coerce('{"a": 1}', Json).loads(), {"a": 1})

    def test_text_to_uuid(self):
        text = "12345678-1234-5678-1234-567812345678"

        value = coerce(text, uuid.UUID)

        self.assertEqual(value, uuid.UUID(text))
        self.assertEqual(str(value), text)

    def test_malformed_uuid_raises(self):
        with self.assertRaises(CoercionError):
            coerce("not-a-uuid", uuid.UUID)

    def test_datetime_to_date_drops_time(self):
        self.assertEqual(coerce(datetime(2023, 7, 4, 23, 59), date), date(2023, 7, 4))

    def test_datetime_stays_datetime_for_datetime_target(self):
        moment = datetime(2023, 7, 4, 23, 59)
        self.assertIs(coerce(moment, datetime), moment)

    def test_optional_and_final_targets_are_unwrapped(self):
        self.assertIs(coerce("ACTIVE", Optional[Status]), Status.ACTIVE)
        self.assertIs(coerce("ACTIVE", Final[Status]), Status.ACTIVE)
        self.assertEqual(coerce(datetime(2020, 1, 2, 3, 4), date | None), date(2020, 1, 2))

    def test_unmatched_pairs_pass_through(self):
        self.assertEqual(coerce("42", int), "42")
        self.assertEqual(coerce(42, str), 42)
        self.assertEqual(coerce("2024-01-01", date), "2024-01-01")
        self.assertEqual(coerce("x", object), "x")
        self.assertEqual(coerce("x", "SomeForwardRef"), "x")
        self.assertEqual(coerce("x", int | str), "x")

    def test_values_already_of_target_type_pass_through(self):
        self.assertIs(coerce(Status.ACTIVE, Status), Status.ACTIVE)
        identifier = uuid.uuid4()
        self.assertIs(coerce(identifier, uuid.UUID), identifier)

    def test_protocol_target_passes_through(self):
        self.assertEqual(coerce("x", Named), "x")


if __name__ == "__main__":
    unittest.main()
