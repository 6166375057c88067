"""
Identification and validation of UPC-A, UPC-E, EAN-8, EAN-13 and CODE39 barcodes.
"""

from barcodeid.barcode import (
    BarcodeClassifier,
    classify,
    explain,
    get_classifier,
    identify,
    validate,
)
from barcodeid.config import Settings, get_settings
from barcodeid.exceptions import UnknownSymbologyError
from barcodeid.models import BarcodeRecord, Outcome, Symbology

__version__ = "0.1.0"

__all__ = [
    "BarcodeClassifier",
    "BarcodeRecord",
    "Outcome",
    "Settings",
    "Symbology",
    "UnknownSymbologyError",
    "classify",
    "explain",
    "get_classifier",
    "get_settings",
    "identify",
    "validate",
]
