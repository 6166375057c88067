"""
Barcode identification and validation by length and character class.
"""

import logging
import re
from functools import lru_cache

import structlog

from barcodeid.barcode.rules import check_charset, check_length, rule_for
from barcodeid.config import get_settings
from barcodeid.models.record import BarcodeRecord
from barcodeid.models.symbology import Outcome, Symbology

# Events go through stdlib logging and obey its levels
logger = structlog.wrap_logger(logging.getLogger(__name__))

_DIGITS_ONLY = re.compile(r"[0-9]*")

# Fixed lengths with the check digit omitted
LENGTH_MAP = {
    11: Symbology.UPCA,
    6: Symbology.UPCE,
    7: Symbology.EAN8,
    12: Symbology.EAN13,
}


def _as_code(barcode: object) -> str:
    """Coerce a barcode value to a string; None becomes empty."""
    return "" if barcode is None else str(barcode)


class BarcodeClassifier:
    """
    Identify and validate UPC-A, UPC-E, EAN-8, EAN-13 and CODE39 barcodes.

    Barcodes are passed without their check digit. Identification looks
    only at length and whether the code is all digits; validation checks
    length and allowed characters for a declared symbology.

    classify(), check() and explain() are pure. identify() and validate()
    operate on a BarcodeRecord and set its type as a side effect.
    """

    def __init__(
        self,
        code39_threshold: int | None = None,
        validate_threshold: int | None = None,
    ):
        """
        Initialize classifier.

        Args:
            code39_threshold: Digit-only codes longer than this are CODE39
                (default: settings.code39_threshold)
            validate_threshold: Threshold used when validate() identifies an
                untyped record (default: settings.validate_threshold)
        """
        settings = get_settings()
        self.code39_threshold = (
            code39_threshold if code39_threshold is not None else settings.code39_threshold
        )
        if validate_threshold is not None:
            self.validate_threshold = validate_threshold
        elif code39_threshold is not None:
            self.validate_threshold = code39_threshold
        else:
            self.validate_threshold = settings.validate_threshold

    def classify(self, barcode: str | None, threshold: int | None = None) -> Symbology | None:
        """
        Classify a barcode by length and character set.

        Args:
            barcode: Barcode string without check digit
            threshold: Override the CODE39 length threshold

        Returns:
            Detected symbology, or None if no rule matches
        """
        code = _as_code(barcode)
        if threshold is None:
            threshold = self.code39_threshold

        if len(code) > threshold or _DIGITS_ONLY.fullmatch(code) is None:
            symbology = Symbology.CODE39
        else:
            symbology = LENGTH_MAP.get(len(code))

        logger.debug("Classified barcode", barcode=code, symbology=symbology)
        return symbology

    def check(self, barcode: str | None, symbology: Symbology | str) -> Outcome:
        """
        Validate a barcode against a declared symbology.

        Raises:
            UnknownSymbologyError: If symbology is not supported
        """
        code = _as_code(barcode)
        rule = rule_for(symbology)

        if check_length(code, rule) and check_charset(code, rule):
            return Outcome.VALID
        return Outcome.INVALID

    def identify(self, record: BarcodeRecord) -> Symbology | Outcome:
        """
        Identify the record's symbology and store it on the record.

        Returns:
            The symbology, or Outcome.UNIDENTIFIED (record left unchanged)
        """
        symbology = self.classify(record.barcode)
        if symbology is None:
            logger.debug("Barcode not identified", barcode=record.barcode)
            return Outcome.UNIDENTIFIED

        record.type = symbology
        return symbology

    def validate(self, record: BarcodeRecord) -> Outcome:
        """
        Validate the record, identifying it first if no type is set.

        Returns:
            Outcome.VALID (0) or Outcome.INVALID (1)
        """
        if not record.type:
            symbology = self.classify(record.barcode, threshold=self.validate_threshold)
            if symbology is None:
                logger.debug("Validation failed: unidentified", barcode=record.barcode)
                return Outcome.INVALID
            record.type = symbology

        outcome = self.check(record.barcode, record.type)
        logger.debug(
            "Validated barcode",
            barcode=record.barcode,
            symbology=record.type,
            outcome=outcome.name,
        )
        return outcome

    def explain(
        self,
        barcode: str | None,
        symbology: Symbology | str | None = None,
    ) -> tuple[Outcome, Symbology | None, str]:
        """
        Validate a barcode without touching any record.

        Args:
            barcode: Barcode string without check digit
            symbology: Declared symbology; identified from the code if omitted

        Returns:
            Tuple of (outcome, symbology, error_message)
        """
        code = _as_code(barcode)

        if symbology:
            symbology = Symbology.parse(symbology)
        else:
            symbology = self.classify(code, threshold=self.validate_threshold)
            if symbology is None:
                return Outcome.INVALID, None, f"Unsupported code length: {len(code)}"

        rule = rule_for(symbology)

        if not check_length(code, rule):
            return (
                Outcome.INVALID,
                symbology,
                f"Invalid {symbology.value} length: expected {rule.length}, got {len(code)}",
            )
        if not check_charset(code, rule):
            return (
                Outcome.INVALID,
                symbology,
                f"Code contains characters not allowed in {symbology.value}",
            )

        return Outcome.VALID, symbology, ""


@lru_cache
def get_classifier() -> BarcodeClassifier:
    """Get cached classifier built from settings."""
    return BarcodeClassifier()


def classify(barcode: str | None) -> Symbology | None:
    """Convenience function to classify a barcode with the default classifier."""
    return get_classifier().classify(barcode)


def identify(record: BarcodeRecord) -> Symbology | Outcome:
    return get_classifier().identify(record)


def validate(record: BarcodeRecord) -> Outcome:
    return get_classifier().validate(record)


def explain(
    barcode: str | None,
    symbology: Symbology | str | None = None,
) -> tuple[Outcome, Symbology | None, str]:
    return get_classifier().explain(barcode, symbology)
