"""
Data models for barcode identification.
"""

from barcodeid.models.record import BarcodeRecord
from barcodeid.models.symbology import Outcome, Symbology

__all__ = [
    "BarcodeRecord",
    "Outcome",
    "Symbology",
]
