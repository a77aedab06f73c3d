"""
Exception types used in this library.

All errors are deterministic consequences of malformed input and are raised
immediately to the caller.
"""

__all__ = [
    "EmptyFilterError",
    "EmptySignalError",
    "ShapeMismatchError",
    "FilterParityMismatchError",
    "DegenerateRescaleError",
]


class EmptyFilterError(ValueError):
    """
    Thrown when a :py:class:`~wsq_subband.filters.Filter` is constructed
    without any coefficients.
    """


class EmptySignalError(ValueError):
    """
    Thrown when a zero-length signal is passed to a one-dimensional filtering,
    extension or subband coding operation.
    """


class ShapeMismatchError(ValueError):
    """
    Thrown when the lengths of a pair of subbands, or the dimensions of a set
    of images, cannot have been produced by a single analysis step. Also
    thrown when a :py:class:`~wsq_subband.float_image.FloatImage` buffer does
    not match its declared dimensions.
    """


class FilterParityMismatchError(ValueError):
    """
    Thrown when a :py:class:`~wsq_subband.subband_coder.TwoChannelSubbandCoder`
    is given one whole-sample and one half-sample analysis filter.
    """


class DegenerateRescaleError(ValueError):
    """
    Thrown by :py:meth:`~wsq_subband.float_image.FloatImage.normalize` when
    asked to divide by a zero rescale factor (e.g. when auto-normalizing a
    constant image whose declared range collapses to that constant).
    """
