"""
Symbology and outcome enums.
"""

from enum import Enum, IntEnum

from barcodeid.exceptions import UnknownSymbologyError


class Symbology(str, Enum):
    """Supported barcode symbologies."""

    UPCA = "UPCA"
    UPCE = "UPCE"
    EAN8 = "EAN8"
    EAN13 = "EAN13"
    CODE39 = "CODE39"

    @classmethod
    def parse(cls, value: "Symbology | str") -> "Symbology":
        """
        Coerce a symbology name into the enum.

        Case, surrounding whitespace, '-' and '_' are ignored, so
        "upc-a", "UPC_A" and "UPCA" all resolve to Symbology.UPCA.

        Raises:
            UnknownSymbologyError: If the value names no supported symbology
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownSymbologyError(value)

        key = value.strip().upper().replace("-", "").replace("_", "")
        try:
            return cls(key)
        except ValueError:
            raise UnknownSymbologyError(value) from None


class Outcome(IntEnum):
    """
    Result codes for identification and validation.

    The integer values are the library's public contract: 0 is a pass,
    1 is a fail and 2 means no length rule matched.
    """

    VALID = 0
    INVALID = 1
    UNIDENTIFIED = 2
