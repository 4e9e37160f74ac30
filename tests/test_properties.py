"""Tests for app.services.properties: template ordering, advisory checks, sample property CRUD and batch atomicity."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from app.models import SampleProperty
from app.services import properties
from app.services.errors import NotFoundError, StorageError, ValidationError
from tests.support import make_session_factory


class PropertiesTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()

    def tearDown(self) -> None:
        self.db.close()


class TestTemplates(PropertiesTestCase):
    def _names(self, commodity_type: str) -> list[str]:
        return [t.property_name for t in properties.list_templates(self.db, commodity_type)]

    def test_ordered_by_display_order(self) -> None:
        properties.create_template(self.db, "gold", "grain_size", display_order=1)
        properties.create_template(self.db, "gold", "color", display_order=2)
        self.assertEqual(self._names("gold"), ["grain_size", "color"])

    def test_out_of_order_inserts_sorted(self) -> None:
        properties.create_template(self.db, "coal", "ash", display_order=3)
        properties.create_template(self.db, "coal", "moisture", display_order=1)
        properties.create_template(self.db, "coal", "sulfur", display_order=2)
        self.assertEqual(self._names("coal"), ["moisture", "sulfur", "ash"])

    def test_ties_keep_insertion_order_and_unordered_last(self) -> None:
        properties.create_template(self.db, "gold", "unordered")
        properties.create_template(self.db, "gold", "b", display_order=1)
        properties.create_template(self.db, "gold", "a", display_order=1)
        self.assertEqual(self._names("gold"), ["b", "a", "unordered"])

    def test_scoped_to_commodity_and_requeried(self) -> None:
        properties.create_template(self.db, "gold", "grain_size", display_order=1)
        properties.create_template(self.db, "coal", "ash", display_order=1)
        self.assertEqual(self._names("gold"), ["grain_size"])
        properties.create_template(self.db, "gold", "color", display_order=2)
        self.assertEqual(self._names("gold"), ["grain_size", "color"])
        self.assertEqual(self._names("copper"), [])

    def test_create_returns_row_with_defaults(self) -> None:
        t = properties.create_template(
            self.db, "gold", "purity", units="%", property_category="chemical"
        )
        self.assertIsNotNone(t.id)
        self.assertEqual(t.units, "%")
        self.assertFalse(t.is_required)
        self.assertIsNone(t.display_order)

    def test_create_requires_commodity_and_name(self) -> None:
        with self.assertRaises(ValidationError):
            properties.create_template(self.db, "", "color")
        with self.assertRaises(ValidationError):
            properties.create_template(self.db, "gold", None)


class TestCheckProperties(PropertiesTestCase):
    def setUp(self) -> None:
        super().setUp()
        properties.create_template(self.db, "gold", "grain_size", is_required=True, display_order=1)
        properties.create_template(self.db, "gold", "color", display_order=2)

    def test_all_known_and_required_present(self) -> None:
        result = properties.check_properties(self.db, "gold", ["grain_size", "color"])
        self.assertTrue(result.valid)
        self.assertEqual(result.unknown, [])
        self.assertEqual(result.missing_required, [])

    def test_reports_unknown_and_missing_required(self) -> None:
        result = properties.check_properties(self.db, "gold", ["color", "hardness"])
        self.assertFalse(result.valid)
        self.assertEqual(result.unknown, ["hardness"])
        self.assertEqual(result.missing_required, ["grain_size"])


class TestSampleProperties(PropertiesTestCase):
    def test_create_keeps_scalar_types(self) -> None:
        numeric = properties.create_property(self.db, 1, "density", 2.65, units="g/cm3")
        text = properties.create_property(self.db, 1, "color", "red")
        self.assertEqual(properties.get_property(self.db, numeric.id).property_value, 2.65)
        self.assertEqual(properties.get_property(self.db, text.id).property_value, "red")

    def test_create_requires_sample_and_name(self) -> None:
        with self.assertRaises(ValidationError):
            properties.create_property(self.db, None, "color")
        with self.assertRaises(ValidationError):
            properties.create_property(self.db, 1, "")

    def test_list_filters_and_ordering(self) -> None:
        a = properties.create_property(self.db, 2, "sulfur", 0.4, property_category="chemical")
        b = properties.create_property(self.db, 1, "density", 2.6, property_category="physical")
        c = properties.create_property(self.db, 1, "ash", 12, property_category="chemical")
        d = properties.create_property(self.db, 1, "color", "grey", property_category="physical")

        self.assertEqual([r.id for r in properties.list_properties(self.db)], [a.id, b.id, c.id, d.id])
        by_sample = properties.list_properties(self.db, sample_id=1)
        self.assertEqual([r.property_name for r in by_sample], ["ash", "color", "density"])
        by_category = properties.list_properties(self.db, category="chemical")
        self.assertEqual([r.id for r in by_category], [c.id, a.id])

    def test_update_only_overwrites_supplied_fields(self) -> None:
        row = properties.create_property(
            self.db, 1, "density", 2.65, units="g/cm3", property_category="physical", notes="core"
        )
        updated = properties.update_property(self.db, row.id, {"notes": "re-logged"})
        self.assertEqual(updated.notes, "re-logged")
        self.assertEqual(updated.property_value, 2.65)
        self.assertEqual(updated.units, "g/cm3")
        self.assertEqual(updated.property_category, "physical")
        self.assertEqual(updated.property_name, "density")
        self.assertEqual(updated.sample_id, 1)

    def test_update_with_null_keeps_stored_value(self) -> None:
        row = properties.create_property(self.db, 1, "density", 2.65, units="g/cm3")
        updated = properties.update_property(
            self.db, row.id, {"units": None, "property_value": 2.7}
        )
        self.assertEqual(updated.units, "g/cm3")
        self.assertEqual(updated.property_value, 2.7)

    def test_update_missing(self) -> None:
        with self.assertRaises(NotFoundError):
            properties.update_property(self.db, 404, {"notes": "x"})

    def test_delete_returns_snapshot(self) -> None:
        row = properties.create_property(self.db, 1, "density", 2.65)
        deleted = properties.delete_property(self.db, row.id)
        self.assertEqual(deleted.id, row.id)
        self.assertEqual(deleted.property_value, 2.65)
        with self.assertRaises(NotFoundError):
            properties.get_property(self.db, row.id)


class TestBatch(PropertiesTestCase):
    def test_creates_n_rows_for_the_sample(self) -> None:
        payload = [
            {"property_name": "grain_size", "property_value": "fine"},
            {"property_name": "color", "property_value": "yellow"},
            {"property_name": "purity", "property_value": 91.5, "units": "%"},
        ]
        rows = properties.create_properties_batch(self.db, 7, payload)
        self.assertEqual(len(rows), 3)
        self.assertEqual(len({r.id for r in rows}), 3)
        self.assertTrue(all(r.sample_id == 7 for r in rows))
        self.assertEqual(self.db.query(SampleProperty).count(), 3)

    def test_empty_batch(self) -> None:
        self.assertEqual(properties.create_properties_batch(self.db, 7, []), [])

    def test_malformed_body_writes_nothing(self) -> None:
        for sample_id, props in (
            (None, [{"property_name": "x"}]),
            (7, {"property_name": "x"}),
            (7, [{"property_name": "x"}, {"property_value": 1}]),
            (7, [{"property_name": "x"}, "y"]),
        ):
            with self.subTest(sample_id=sample_id, props=props):
                with self.assertRaises(ValidationError):
                    properties.create_properties_batch(self.db, sample_id, props)
        self.assertEqual(self.db.query(SampleProperty).count(), 0)

    def test_rows_flushed_before_a_failure_are_discarded(self) -> None:
        properties.create_property(self.db, 1, "density", 2.65)
        # A set is not JSON serializable, so the third row fails at flush.
        payload = [
            {"property_name": "a", "property_value": 1},
            {"property_name": "b", "property_value": "two"},
            {"property_name": "c", "property_value": {3}},
        ]
        with self.assertLogs("app.services.properties", level="ERROR"):
            with self.assertRaises(StorageError):
                properties.create_properties_batch(self.db, 7, payload)
        self.assertEqual(self.db.query(SampleProperty).filter(SampleProperty.sample_id == 7).count(), 0)
        self.assertEqual(self.db.query(SampleProperty).count(), 1)

    def test_mid_batch_failure_rolls_back(self) -> None:
        session = MagicMock()
        session.flush.side_effect = [None, OperationalError("INSERT", {}, Exception("gone"))]
        payload = [{"property_name": "a"}, {"property_name": "b"}, {"property_name": "c"}]
        with self.assertLogs("app.services.properties", level="ERROR"):
            with self.assertRaises(StorageError):
                properties.create_properties_batch(session, 7, payload)
        session.rollback.assert_called_once()
        session.commit.assert_not_called()


if __name__ == "__main__":
    unittest.main()
