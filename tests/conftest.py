"""
Shared fixtures for barcodeid tests.
"""

import pytest

from barcodeid.barcode.classifier import get_classifier
from barcodeid.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Reset cached settings and classifier around each test."""
    monkeypatch.delenv("BARCODEID_CODE39_THRESHOLD", raising=False)
    monkeypatch.delenv("BARCODEID_LEGACY_VALIDATE_THRESHOLD", raising=False)
    get_settings.cache_clear()
    get_classifier.cache_clear()
    yield
    get_settings.cache_clear()
    get_classifier.cache_clear()
