"""
Length and character-class rules per symbology.

Barcodes are checked without their check digit, so the fixed lengths
here are one short of the printed symbol (UPC-A 11, UPC-E 6, EAN-8 7,
EAN-13 12). CODE39 is variable length; only its charset is checked.
"""

import re
from dataclasses import dataclass

from barcodeid.models.symbology import Symbology

DIGITS = "0-9"
CODE39_CHARS = r"0-9A-Z\-.*$/+%"


@dataclass(frozen=True)
class BarcodeRule:
    """Allowed characters and required length for one symbology."""

    symbology: Symbology
    pattern: re.Pattern[str]
    length: int  # 0 = any length

    @classmethod
    def build(cls, symbology: Symbology, charset: str, length: int) -> "BarcodeRule":
        return cls(symbology, re.compile(f"[{charset}]*"), length)


RULES: dict[Symbology, BarcodeRule] = {
    Symbology.UPCA: BarcodeRule.build(Symbology.UPCA, DIGITS, 11),
    Symbology.UPCE: BarcodeRule.build(Symbology.UPCE, DIGITS, 6),
    Symbology.EAN8: BarcodeRule.build(Symbology.EAN8, DIGITS, 7),
    Symbology.EAN13: BarcodeRule.build(Symbology.EAN13, DIGITS, 12),
    Symbology.CODE39: BarcodeRule.build(Symbology.CODE39, CODE39_CHARS, 0),
}


def rule_for(symbology: Symbology | str) -> BarcodeRule:
    """
    Get the rule for a symbology.

    Raises:
        UnknownSymbologyError: If symbology names no supported symbology
    """
    return RULES[Symbology.parse(symbology)]


def check_length(code: str, rule: BarcodeRule) -> bool:
    """Check code length against the rule (always passes for variable length)."""
    return rule.length == 0 or len(code) == rule.length


def check_charset(code: str, rule: BarcodeRule) -> bool:
    """Check that every character is allowed. The empty string passes."""
    return rule.pattern.fullmatch(code) is not None
