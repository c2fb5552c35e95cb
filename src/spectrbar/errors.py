"""Exceptions raised by spectrbar."""


class SpectrbarError(Exception):
    """Base class for spectrbar errors."""


class NumericParseError(SpectrbarError, ValueError):
    """A numeric widget's source produced no usable integer.

    Raised when the sampled text contains no decimal digits, or when the
    scraped digits exceed the supported range. This points at a widget
    misconfiguration rather than a transient source failure.
    """

    def __init__(self, source: str, raw: str, reason: str = "no digits found") -> None:
        self.source = source
        self.raw = raw
        self.reason = reason
        super().__init__(f"{source}: {reason} in {raw!r}")
