"""
Barcode identification and validation.
"""

from barcodeid.barcode.classifier import (
    BarcodeClassifier,
    classify,
    explain,
    get_classifier,
    identify,
    validate,
)
from barcodeid.barcode.rules import RULES, BarcodeRule, rule_for

__all__ = [
    "BarcodeClassifier",
    "BarcodeRule",
    "RULES",
    "classify",
    "explain",
    "get_classifier",
    "identify",
    "rule_for",
    "validate",
]
