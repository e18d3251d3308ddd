"""Open Record model and to_record projection."""

from types import SimpleNamespace

import pytest

from recordview import FixedTypeError, Record, decorate, get_bundle, is_open, to_record, type_names

from conftest import FrozenItem, FrozenModel, Point, Slotted


class TestRecord:
    def test_accepts_arbitrary_fields(self):
        record = Record(sku="x", qty=3)
        assert record.sku == "x"
        assert record.fields() == {"sku": "x", "qty": 3}

    def test_is_open(self):
        assert is_open(Record())

    def test_add_and_remove(self):
        record = Record(sku="x")
        record.add(qty=3, bin="A3")
        assert record.fields() == {"sku": "x", "qty": 3, "bin": "A3"}
        record.remove("bin")
        record.remove("missing")
        assert record.fields() == {"sku": "x", "qty": 3}

    def test_remove_ignores_view_metadata(self):
        record = Record(sku="x")
        decorate(record, display_fields=["sku"])
        record.remove("__recordview__")
        record.add(qty=1)
        assert get_bundle(record).display_fields == ("sku",)
        assert record.fields() == {"sku": "x", "qty": 1}

    def test_decoration_not_exported_as_field(self):
        record = Record(sku="x")
        decorate(record, display_fields=["sku"], type_name="Item")
        assert record.fields() == {"sku": "x"}
        assert get_bundle(record).display_fields == ("sku",)
        assert type_names(record)[0] == "Item"


class TestToRecord:
    @pytest.mark.parametrize(
        "source, expected",
        [
            (Point(1, 2), {"x": 1, "y": 2}),
            (FrozenItem("a", 1), {"sku": "a", "qty": 1}),
            (Slotted("a", 1), {"sku": "a", "qty": 1}),
            (FrozenModel(sku="a", qty=1), {"sku": "a", "qty": 1}),
            ({"sku": "a"}, {"sku": "a"}),
            (SimpleNamespace(sku="a"), {"sku": "a"}),
        ],
        ids=["namedtuple", "frozen-dataclass", "slots", "frozen-pydantic", "dict", "namespace"],
    )
    def test_discovers_fields(self, source, expected):
        assert to_record(source).fields() == expected

    def test_explicit_fields_in_order(self):
        record = to_record(FrozenItem("a", 1), fields=["qty", "sku"])
        assert list(record.fields()) == ["qty", "sku"]

    def test_missing_field_is_none(self):
        assert to_record({"sku": "a"}, fields=["sku", "bin"]).fields() == {"sku": "a", "bin": None}

    def test_scalar_needs_explicit_fields(self):
        with pytest.raises(TypeError, match="pass fields"):
            to_record(42)

    def test_scalar_with_fields(self):
        assert to_record(42, fields=["real", "imag"]).fields() == {"real": 42, "imag": 0}

    def test_source_untouched_and_metadata_not_copied(self):
        source = {"sku": "a"}
        decorate(source, display_fields=["sku"], type_name="Item")
        record = to_record(source)
        assert get_bundle(record) is None
        assert type_names(record)[0] != "Item"
        assert get_bundle(source).display_fields == ("sku",)

    def test_remedy_for_fixed_record(self):
        point = Point(1, 2)
        with pytest.raises(FixedTypeError):
            decorate(point, display_fields=["x"])
        record = decorate(to_record(point), display_fields=["x"], passthru=True)
        assert get_bundle(record).display_fields == ("x",)
