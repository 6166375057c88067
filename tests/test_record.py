"""
Tests for the barcode record and its accessors.
"""

import pytest

from barcodeid.exceptions import UnknownSymbologyError
from barcodeid.models import BarcodeRecord, Outcome, Symbology


class TestBarcodeRecord:
    """Tests for BarcodeRecord."""

    def test_create_empty(self):
        """Test creating a record with no values."""
        record = BarcodeRecord()
        assert record.get_barcode() is None
        assert record.get_type() is None

    def test_create_with_values(self):
        """Test values are stored, with the type coerced to the enum."""
        record = BarcodeRecord(barcode="012345", type="upc-e")
        assert record.get_barcode() == "012345"
        assert record.get_type() is Symbology.UPCE

    def test_barcode_not_validated_on_create(self):
        """Test any barcode string is accepted verbatim."""
        record = BarcodeRecord(barcode="not a barcode!")
        assert record.barcode == "not a barcode!"

    def test_empty_type_is_unset(self):
        """Test an empty type string leaves the record untyped."""
        assert BarcodeRecord(barcode="123", type="").type is None

    def test_create_unknown_type(self):
        """Test an unsupported type is rejected at construction."""
        with pytest.raises(UnknownSymbologyError):
            BarcodeRecord(barcode="123456", type="CODE128")


class TestAccessors:
    """Tests for the set-if-truthy accessors."""

    def test_set_type_round_trip(self):
        """Test setting and reading back a type."""
        record = BarcodeRecord(barcode="1234567")
        assert record.set_type("EAN8") is Symbology.EAN8
        assert record.get_type() == "EAN8"

    @pytest.mark.parametrize("value", ["", None])
    def test_set_type_empty_is_ignored(self, value):
        """Test an empty type leaves the previous value unchanged."""
        record = BarcodeRecord(type=Symbology.UPCA)
        assert record.set_type(value) is Symbology.UPCA
        assert record.type is Symbology.UPCA

    def test_set_type_unknown(self):
        """Test an unsupported type raises and keeps the old value."""
        record = BarcodeRecord(type="EAN13")
        with pytest.raises(UnknownSymbologyError):
            record.set_type("ITF")
        assert record.type is Symbology.EAN13

    def test_set_barcode(self):
        """Test replacing the barcode."""
        record = BarcodeRecord(barcode="123456")
        assert record.set_barcode("1029384") == "1029384"
        assert record.get_barcode() == "1029384"

    @pytest.mark.parametrize("value", ["", None])
    def test_set_barcode_empty_is_ignored(self, value):
        """Test an empty barcode leaves the previous value unchanged."""
        record = BarcodeRecord(barcode="123456")
        assert record.set_barcode(value) == "123456"

    def test_clear(self):
        """Test explicit clearing of both fields."""
        record = BarcodeRecord(barcode="123456", type="UPCE")
        record.clear_type()
        record.clear_barcode()
        assert record.type is None
        assert record.barcode is None


class TestRecordOperations:
    """Tests for identify()/validate() on the record itself."""

    def test_identify_then_validate(self):
        """Test the identify-then-validate flow."""
        record = BarcodeRecord(barcode="012345")
        assert record.identify() is Symbology.UPCE
        assert record.get_type() is Symbology.UPCE
        assert record.validate() is Outcome.VALID

    def test_validate_declared(self):
        """Test validating against a declared type."""
        record = BarcodeRecord(barcode="012345", type="UPCE")
        assert not record.validate()

    def test_validate_fails_truthy(self):
        """Test a failed validation is truthy."""
        record = BarcodeRecord(barcode="012345", type="EAN13")
        assert record.validate()

    def test_type_change_revalidates(self):
        """Test changing the declared type changes the outcome."""
        record = BarcodeRecord(barcode="1234567")
        assert record.validate() is Outcome.VALID
        record.set_type("UPCA")
        assert record.validate() is Outcome.INVALID
