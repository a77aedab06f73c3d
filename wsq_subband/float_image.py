"""
:py:mod:`wsq_subband.float_image`: Floating point picture container
===================================================================

The 2-D transform operates on :py:class:`FloatImage` objects: a rectangular
grid of floating point samples stored as a flat, row-major :py:mod:`numpy`
buffer along with a declared (or observed) sample range.

The declared range (``min_value`` and ``max_value``) plays no part in the
transform itself. It is used to normalise pictures before analysis and to map
subbands and reconstructed pictures back onto integer sample values for
display.

.. autoclass:: FloatImage
    :members:

"""

import logging

import numpy as np

from wsq_subband.exceptions import (
    ShapeMismatchError,
    EmptySignalError,
    DegenerateRescaleError,
)

__all__ = [
    "FloatImage",
]


class FloatImage(object):
    """
    A rectangular grid of floating point samples.

    Parameters
    ==========
    data : sequence of float
        The samples, in row-major order. Must contain exactly
        ``width * height`` values, otherwise
        :py:exc:`~wsq_subband.exceptions.ShapeMismatchError` is raised. The
        values are copied.
    width, height : int
    min_value, max_value : float
        The declared range of sample values.

    Attributes
    ==========
    data : :py:class:`numpy.ndarray`
        The flat ``float64`` sample buffer.
    width, height : int
    min_value, max_value : float
    """

    def __init__(self, data, width, height, min_value=0.0, max_value=1.0):
        data = np.array(data, dtype=float).ravel()
        if len(data) != width * height:
            raise ShapeMismatchError(
                "Expected {}x{} = {} samples, got {}.".format(
                    width, height, width * height, len(data),
                )
            )

        self.data = data
        self.width = width
        self.height = height
        self.min_value = min_value
        self.max_value = max_value

    @classmethod
    def from_rows(cls, rows, min_value=0.0, max_value=1.0):
        """
        Construct an image from a sequence of equal-length rows.
        """
        rows = [np.asarray(row, dtype=float) for row in rows]
        height = len(rows)
        width = len(rows[0]) if rows else 0

        for y, row in enumerate(rows):
            if len(row) != width:
                raise ShapeMismatchError(
                    "Row {} has {} samples, expected {}.".format(y, len(row), width)
                )

        if rows:
            data = np.concatenate(rows)
        else:
            data = np.zeros(0)

        return cls(data, width, height, min_value, max_value)

    @classmethod
    def from_array(cls, array, min_value=0.0, max_value=1.0):
        """
        Construct an image from a 2-D array-like indexed as ``[y, x]``.
        """
        array = np.asarray(array, dtype=float)
        if array.ndim != 2:
            raise ShapeMismatchError(
                "Expected a 2-D array, got {} dimension(s).".format(array.ndim)
            )
        height, width = array.shape
        return cls(array, width, height, min_value, max_value)

    @classmethod
    def from_integer_samples(cls, samples, max_value):
        """
        Construct an image from a 2-D array of non-negative integer samples
        (e.g. as read from a picture file) whose values lie in the range
        ``0`` to ``max_value``.
        """
        return cls.from_array(samples, 0.0, float(max_value))

    def to_array(self):
        """
        Return a 2-D ``(height, width)`` view of the sample buffer.
        """
        return self.data.reshape((self.height, self.width))

    def to_integer_samples(self, max_value):
        """
        Map the declared sample range linearly onto the integers ``0`` to
        ``max_value`` (inclusive), rounding and clipping as required.

        Returns a 2-D ``(height, width)`` integer array. If the declared range
        is empty, all samples map to zero.
        """
        value_range = self.max_value - self.min_value
        if value_range == 0:
            return np.zeros((self.height, self.width), dtype=int)

        scaled = (self.to_array() - self.min_value) * (max_value / value_range)
        return np.clip(np.round(scaled), 0, max_value).astype(int)

    def rows(self):
        """Iterate over the rows of the image (as :py:mod:`numpy` views)."""
        return iter(self.to_array())

    def columns(self):
        """Iterate over the columns of the image (as strided views)."""
        return iter(self.to_array().T)

    def rotate(self):
        """
        Transpose the image in place: columns become rows and the width and
        height are swapped.
        """
        self.data = self.to_array().T.flatten()
        self.width, self.height = self.height, self.width

    def copy(self):
        """Return an independent copy of this image."""
        return FloatImage(
            self.data,
            self.width,
            self.height,
            self.min_value,
            self.max_value,
        )

    def get_mean_and_rescale(self):
        """
        Compute the normalisation parameters for this image.

        Returns
        =======
        (mean, rescale) : (float, float)
            The mean sample value and the factor which scales the larger of
            ``max_value - mean`` and ``mean - min_value`` to 128.
        """
        if len(self.data) == 0:
            raise EmptySignalError("Cannot normalise an empty image.")

        mean = float(np.mean(self.data))
        rescale = max(self.max_value - mean, mean - self.min_value) / 128.0
        return (mean, rescale)

    def normalize(self, mean, rescale):
        """
        Replace every sample ``s`` with ``(s - mean) / rescale``, in place.

        The declared range is not updated; use :py:meth:`find_and_set_min_max`
        afterwards if required.
        """
        if rescale == 0:
            raise DegenerateRescaleError(
                "Cannot normalise with a rescale factor of zero."
            )
        self.data -= mean
        self.data /= rescale

    def auto_normalize(self):
        """
        Centre the image on its mean and scale its declared range to roughly
        +/-128 (see :py:meth:`get_mean_and_rescale`), in place.
        """
        mean, rescale = self.get_mean_and_rescale()
        logging.debug("Normalizing image with mean %s and rescale %s", mean, rescale)
        self.normalize(mean, rescale)

    def find_min_max(self):
        """
        Return the smallest and largest sample values in the image. An empty
        image returns its declared range.
        """
        if len(self.data) == 0:
            return (self.min_value, self.max_value)
        return (float(np.min(self.data)), float(np.max(self.data)))

    def find_and_set_min_max(self):
        """
        Set the declared range to the observed range of sample values.
        """
        self.min_value, self.max_value = self.find_min_max()
        logging.debug(
            "Setting min and max value of float image to %s, %s",
            self.min_value,
            self.max_value,
        )

    def __repr__(self):
        return "<{} {}x{} min_value={} max_value={}>".format(
            type(self).__name__,
            self.width,
            self.height,
            self.min_value,
            self.max_value,
        )
