"""
Exceptions raised by barcodeid.
"""


class UnknownSymbologyError(ValueError):
    """Raised when a declared barcode type is not a supported symbology."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown barcode symbology: {value!r}")
