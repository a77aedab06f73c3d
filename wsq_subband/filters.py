r"""
:py:mod:`wsq_subband.filters`: Symmetric FIR filters
====================================================

Finite impulse response (FIR) filters used by the subband coder are always
symmetric or antisymmetric and so only one half of their coefficients need be
stored. The :py:class:`SymmetryTypes` of a filter says how the stored half is
mirrored to produce the complete impulse response.

.. autoclass:: SymmetryTypes
    :members:

.. autoclass:: Filter
    :members:

.. autoclass:: FilterExtension
    :members:

.. autofunction:: convolve


Coefficient layout
------------------

For a filter with stored coefficients :math:`c_0, \ldots, c_{L-1}` the
complete impulse response :math:`h[n]` is:

=====  ====================  =============================================
Class  Time indices          :math:`h[n]` for :math:`n < 0`
=====  ====================  =============================================
WSS    :math:`-(L-1)..L-1`   :math:`c_{-n}`
WSA    :math:`-(L-1)..L-1`   :math:`-c_{-n}`
HSS    :math:`-L..L-1`       :math:`c_{-n-1}`
HSA    :math:`-L..L-1`       :math:`-c_{-n-1}`
=====  ====================  =============================================

In every case :math:`h[n] = c_n` for :math:`n \geq 0`. For example, the
whole-sample antisymmetric filter ``[3, 2, 1]`` has the impulse response
``[-1, -2, 3, 2, 1]`` and the half-sample antisymmetric filter ``[3, 2, 1]``
has the impulse response ``[-1, -2, -3, 3, 2, 1]``.


Dual filters
------------

:py:meth:`Filter.invert` derives the synthesis filter which pairs with an
analysis filter in a perfect-reconstruction filter bank by alternately negating
the stored coefficients and toggling between the symmetric and antisymmetric
class of the same sample parity.

For half-sample filters this is equivalent to the textbook relations
:math:`g_0[n] = (-1)^n h_1[n]` and :math:`g_1[n] = -(-1)^n h_0[n]`.

"""

from itertools import islice

from enum import Enum

import numpy as np

from wsq_subband.exceptions import EmptyFilterError, EmptySignalError

from wsq_subband.signal_extension import ExtensionTypes, SignalExtension

__all__ = [
    "SymmetryTypes",
    "Filter",
    "FilterExtension",
    "convolve",
]


class SymmetryTypes(Enum):
    """
    The four symmetry classes a :py:class:`Filter` may belong to.
    """

    whole_sample_symmetric = "WSS"
    half_sample_symmetric = "HSS"
    whole_sample_antisymmetric = "WSA"
    half_sample_antisymmetric = "HSA"

    @property
    def whole_sample(self):
        """True if the mirror axis falls on the first stored coefficient."""
        return self in (
            SymmetryTypes.whole_sample_symmetric,
            SymmetryTypes.whole_sample_antisymmetric,
        )

    @property
    def antisymmetric(self):
        """True if the mirrored half of the filter is negated."""
        return self in (
            SymmetryTypes.whole_sample_antisymmetric,
            SymmetryTypes.half_sample_antisymmetric,
        )

    @property
    def dual(self):
        """The symmetry class of this class's dual (synthesis) filter."""
        return DUAL_SYMMETRY_TYPES[self]

    @property
    def signal_extension_type(self):
        """
        The :py:class:`~wsq_subband.signal_extension.ExtensionTypes` used to
        extend signals filtered by filters of this class.
        """
        if self.whole_sample:
            return ExtensionTypes.whole_sample_symmetric
        else:
            return ExtensionTypes.half_sample_symmetric


DUAL_SYMMETRY_TYPES = {
    SymmetryTypes.whole_sample_symmetric: SymmetryTypes.whole_sample_antisymmetric,
    SymmetryTypes.whole_sample_antisymmetric: SymmetryTypes.whole_sample_symmetric,
    SymmetryTypes.half_sample_symmetric: SymmetryTypes.half_sample_antisymmetric,
    SymmetryTypes.half_sample_antisymmetric: SymmetryTypes.half_sample_symmetric,
}
"""
Lookup from a filter's symmetry class to the symmetry class of its dual.
"""


def convolve(signal, kernel):
    """
    Full (linear) discrete convolution of two finite sequences.

    The result is computed as a diagonal reduction: the outer product of the
    signal and kernel is formed and each anti-diagonal (i.e. each set of
    entries whose signal and kernel indices sum to the same output index) is
    summed.

    Parameters
    ==========
    signal : sequence of float
    kernel : sequence of float

    Returns
    =======
    output : :py:class:`numpy.ndarray`
        An array of ``len(signal) + len(kernel) - 1`` samples.
    """
    signal = np.asarray(signal, dtype=float)
    kernel = np.asarray(kernel, dtype=float)
    if len(signal) == 0 or len(kernel) == 0:
        raise EmptySignalError("Cannot convolve an empty sequence.")

    # stacked[i, j] = signal[i] * kernel[j]; reversing the rows turns each
    # anti-diagonal into an ordinary diagonal.
    stacked = np.outer(signal, kernel)[::-1, :]
    first = 1 - len(signal)
    return np.array([
        stacked.diagonal(offset).sum()
        for offset in range(first, len(kernel))
    ])


class Filter(object):
    """
    An immutable symmetric or antisymmetric FIR filter.

    Parameters
    ==========
    coefficients : sequence of float
        The stored (right-hand) half of the filter, starting at the mirror
        axis. Must not be empty.
    symmetry : :py:class:`SymmetryTypes`
        How the stored half is mirrored.
    """

    def __init__(self, coefficients, symmetry):
        coefficients = tuple(float(c) for c in coefficients)
        if len(coefficients) == 0:
            raise EmptyFilterError("A filter requires at least one coefficient.")

        self._coefficients = coefficients
        self._symmetry = SymmetryTypes(symmetry)

    @property
    def coefficients(self):
        """The stored half of the filter (a tuple)."""
        return self._coefficients

    @property
    def symmetry(self):
        """The :py:class:`SymmetryTypes` of this filter."""
        return self._symmetry

    def __len__(self):
        """The length of the complete (mirrored) impulse response."""
        if self._symmetry.whole_sample:
            return (2 * len(self._coefficients)) - 1
        else:
            return 2 * len(self._coefficients)

    @property
    def first_index(self):
        """The time index of the first tap of the mirrored impulse response."""
        return self.last_index - len(self) + 1

    @property
    def last_index(self):
        """The time index of the last tap of the mirrored impulse response."""
        return len(self._coefficients) - 1

    def extension(self):
        """
        Return a new :py:class:`FilterExtension` over the complete impulse
        response of this filter.
        """
        return FilterExtension(self)

    def invert(self):
        """
        Derive the dual filter used for synthesis.

        Symmetric filters become antisymmetric with their even-indexed
        coefficients negated. Antisymmetric filters become symmetric with their
        odd-indexed coefficients negated. The sample parity is unchanged.
        """
        if self._symmetry.antisymmetric:
            negated_parity = 1
        else:
            negated_parity = 0

        return Filter(
            (
                -c if i % 2 == negated_parity else c
                for i, c in enumerate(self._coefficients)
            ),
            self._symmetry.dual,
        )

    def apply(self, signal, extension_type=None):
        """
        Filter a finite signal, symmetrically extending it beyond its ends.

        Output sample :math:`k` is :math:`\\sum_m h[m] x[k - m]` where
        :math:`x` is the extended signal and :math:`h` the complete impulse
        response of this filter.

        Parameters
        ==========
        signal : sequence of float
            The (non-empty) signal to filter.
        extension_type : :py:class:`~wsq_subband.signal_extension.ExtensionTypes` or None
            How to extend the signal. If None, the symmetric extension matching
            this filter's sample parity is used.

        Returns
        =======
        output : :py:class:`numpy.ndarray`
            The filtered signal, the same length as the input.
        """
        if len(signal) == 0:
            raise EmptySignalError("Cannot filter an empty signal.")

        if extension_type is None:
            extension_type = self._symmetry.signal_extension_type

        extended = SignalExtension(signal, extension_type)

        # The window of extended samples which affect outputs 0..N-1 starts at
        # time -last_index.
        start = (-self.last_index) % extended.period
        window_length = len(signal) + len(self) - 1
        window = np.fromiter(
            islice(extended, start, start + window_length),
            dtype=float,
            count=window_length,
        )

        # Discard the transients at either end where the kernel overhangs the
        # window.
        valid_start = len(self) - 1
        filtered = convolve(window, list(self.extension()))
        return filtered[valid_start:valid_start + len(signal)]

    def __eq__(self, other):
        return (
            isinstance(other, Filter) and
            self._symmetry == other._symmetry and
            self._coefficients == other._coefficients
        )

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self._coefficients, self._symmetry))

    def __repr__(self):
        return "{}({!r}, {})".format(
            type(self).__name__,
            list(self._coefficients),
            self._symmetry,
        )


class FilterExtension(object):
    """
    A finite iterator over the complete (mirrored) impulse response of a
    :py:class:`Filter`, in increasing time order.

    The mirrored half is produced first (negated for antisymmetric filters),
    followed by the stored coefficients. For whole-sample filters the axis
    coefficient is not repeated; for half-sample filters it is.

    Example::

        >>> f = Filter([3, 2, 1], SymmetryTypes.whole_sample_antisymmetric)
        >>> list(FilterExtension(f))
        [-1.0, -2.0, 3.0, 2.0, 1.0]
    """

    def __init__(self, fir):
        self._coefficients = fir.coefficients
        self._negate_mirrored = fir.symmetry.antisymmetric
        self._period = len(fir)

        # Number of entries in the mirrored part
        self._last_mirrored = self._period - len(self._coefficients)

        self._index = 0

    @property
    def period(self):
        """Total number of coefficients produced."""
        return self._period

    def __iter__(self):
        return self

    def __next__(self):
        if self._index >= self._period:
            raise StopIteration()

        if self._index < self._last_mirrored:
            value = self._coefficients[len(self._coefficients) - self._index - 1]
            if self._negate_mirrored:
                value = -value
        else:
            value = self._coefficients[self._index - self._last_mirrored]

        self._index += 1
        return value
