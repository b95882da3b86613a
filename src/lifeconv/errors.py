"""Exception hierarchy for pattern conversion.

Every failure raised by the codecs derives from ``LifeConvError`` so callers
can surface the message verbatim and abort the conversion.  I/O problems are
not wrapped: they propagate as the builtin ``OSError`` family.
"""

from __future__ import annotations


class LifeConvError(Exception):
    """Base class for all conversion failures."""


class FormatDetectionError(LifeConvError):
    """The input text has no line that can classify its format."""


class ParsingError(LifeConvError):
    """The input text is malformed for the format it was parsed as."""


class WritingError(LifeConvError):
    """A grid could not be serialised.

    Raised for invalid writer options such as a non-positive RLE line
    width.  Failures of the sink itself surface as its own ``OSError``.
    """
