"""
Barcode record holding a barcode string and its declared symbology.
"""

from dataclasses import dataclass

from barcodeid.models.symbology import Outcome, Symbology


@dataclass
class BarcodeRecord:
    """
    A barcode (check digit omitted) and its symbology, if known.

    The barcode is stored verbatim. The type is coerced into a Symbology
    on construction and by set_type().

    Example:
        >>> record = BarcodeRecord(barcode="012345")
        >>> record.identify()
        <Symbology.UPCE: 'UPCE'>
        >>> record.validate()
        <Outcome.VALID: 0>
    """

    barcode: str | None = None
    type: Symbology | None = None

    def __post_init__(self) -> None:
        if self.type:
            self.type = Symbology.parse(self.type)
        else:
            self.type = None

    def get_barcode(self) -> str | None:
        return self.barcode

    def set_barcode(self, value: str | None) -> str | None:
        """Set the barcode if value is non-empty and return the current barcode."""
        if value:
            self.barcode = value
        return self.barcode

    def clear_barcode(self) -> None:
        self.barcode = None

    def get_type(self) -> Symbology | None:
        return self.type

    def set_type(self, value: Symbology | str | None) -> Symbology | None:
        """
        Set the symbology if value is non-empty and return the current type.

        An empty value is ignored; use clear_type() to unset.

        Raises:
            UnknownSymbologyError: If value names no supported symbology
        """
        if value:
            self.type = Symbology.parse(value)
        return self.type

    def clear_type(self) -> None:
        self.type = None

    def identify(self) -> Symbology | Outcome:
        """Identify the symbology with the default classifier (sets type on success)."""
        from barcodeid.barcode.classifier import get_classifier

        return get_classifier().identify(self)

    def validate(self) -> Outcome:
        """Validate with the default classifier (sets type if it was unset)."""
        from barcodeid.barcode.classifier import get_classifier

        return get_classifier().validate(self)
