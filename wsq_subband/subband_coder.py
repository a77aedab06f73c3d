r"""
:py:mod:`wsq_subband.subband_coder`: One-dimensional two-channel subband coder
==============================================================================

A two-channel subband coder splits a signal into a lowpass and a highpass
subband, each containing (roughly) half as many samples as the input, and can
recombine the two subbands to reconstruct the original signal.

.. autoclass:: TwoChannelSubbandCoder
    :members:

.. autofunction:: downsample

.. autofunction:: upsample


Subband lengths
---------------

For an input of :math:`N` samples, the lowpass subband contains
:math:`\lceil N/2 \rceil` samples and the highpass subband
:math:`\lfloor N/2 \rfloor` samples. For odd :math:`N` the final highpass
sample lies on an axis of antisymmetry (and is therefore zero) and is not
stored. As a result the original length is always ``len(a0) + len(a1)``.


Boundary handling during synthesis
----------------------------------

During analysis the input is extended according to the analysis filters'
sample parity and the filtered outputs inherit the (anti)symmetry of the
filters. Synthesis must re-extend the upsampled subbands with exactly that
inherited symmetry, which is not generally the same as the extension implied
by the synthesis filters.

For half-sample filter banks both filtered outputs are mirrored about time
indices :math:`-1` and :math:`N-1`. Each upsampled subband is therefore
prefixed with a (zero) sample at time :math:`-1` and extended with whole-sample
symmetry (lowpass) or antisymmetry (highpass). The resulting half-sample bank
advances its output by one sample, which is exactly compensated by the prefix.

"""

import logging

import numpy as np

from wsq_subband.exceptions import (
    EmptySignalError,
    ShapeMismatchError,
    FilterParityMismatchError,
)

from wsq_subband.signal_extension import ExtensionTypes

from wsq_subband.tables import FILTER_BANKS

__all__ = [
    "downsample",
    "upsample",
    "TwoChannelSubbandCoder",
]


def downsample(signal):
    """
    Keep only the even-indexed samples of a signal.

    Example::

        >>> list(downsample([0, 1, 2, 3, 4]))
        [0.0, 2.0, 4.0]
    """
    return np.array(signal, dtype=float)[::2]


def upsample(signal):
    """
    Insert a zero after every sample of a signal.

    Example::

        >>> list(upsample([0, 1, 2]))
        [0.0, 0.0, 1.0, 0.0, 2.0, 0.0]
    """
    signal = np.asarray(signal, dtype=float)
    out = np.zeros(2 * len(signal))
    out[::2] = signal
    return out


def _synthesis_input(subband, length, half_sample):
    """
    Upsample a subband and pad or truncate it to the samples (at times
    0..length-1, and also -1 for half-sample banks) needed for synthesis.
    """
    upsampled = upsample(subband)
    if half_sample:
        upsampled = np.concatenate(([0.0], upsampled))
        length += 1

    out = np.zeros(length)
    count = min(length, len(upsampled))
    out[:count] = upsampled[:count]
    return out


def _channel_extension_type(analysis_filter):
    """
    The extension matching the symmetry a signal inherits from being filtered
    by ``analysis_filter`` and subsampled.
    """
    if analysis_filter.symmetry.antisymmetric:
        return ExtensionTypes.whole_sample_antisymmetric
    else:
        return ExtensionTypes.whole_sample_symmetric


class TwoChannelSubbandCoder(object):
    """
    A two-channel analysis/synthesis filter bank.

    The synthesis filters are derived from the analysis filters (see
    :py:meth:`~wsq_subband.filters.Filter.invert`): the synthesis lowpass
    filter is the dual of the analysis highpass filter and vice versa.

    .. note::

        No check is made that the analysis filters form a complementary pair.
        Non-complementary filters produce subbands which do not reconstruct
        the input.

    Parameters
    ==========
    analysis_lowpass : :py:class:`~wsq_subband.filters.Filter`
    analysis_highpass : :py:class:`~wsq_subband.filters.Filter`
        Both filters must have the same sample parity (i.e. both whole-sample
        or both half-sample), otherwise
        :py:exc:`~wsq_subband.exceptions.FilterParityMismatchError` is raised.
    """

    downsample = staticmethod(downsample)
    upsample = staticmethod(upsample)

    def __init__(self, analysis_lowpass, analysis_highpass):
        if (
            analysis_lowpass.symmetry.whole_sample !=
            analysis_highpass.symmetry.whole_sample
        ):
            raise FilterParityMismatchError(
                "Analysis filters must both be whole-sample or both be "
                "half-sample filters (got {} and {}).".format(
                    analysis_lowpass.symmetry.value,
                    analysis_highpass.symmetry.value,
                )
            )

        self._analysis_lowpass = analysis_lowpass
        self._analysis_highpass = analysis_highpass
        self._synthesis_lowpass = analysis_highpass.invert()
        self._synthesis_highpass = analysis_lowpass.invert()

        logging.debug(
            "TwoChannelSubbandCoder: synthesis lowpass = %r", self._synthesis_lowpass
        )
        logging.debug(
            "TwoChannelSubbandCoder: synthesis highpass = %r", self._synthesis_highpass
        )

    @classmethod
    def from_table(cls, filter_bank):
        """
        Construct a coder from one of the predefined
        :py:class:`~wsq_subband.tables.FilterBanks`.
        """
        params = FILTER_BANKS[filter_bank]
        return cls(params.lowpass, params.highpass)

    @property
    def analysis_lowpass(self):
        return self._analysis_lowpass

    @property
    def analysis_highpass(self):
        return self._analysis_highpass

    @property
    def synthesis_lowpass(self):
        return self._synthesis_lowpass

    @property
    def synthesis_highpass(self):
        return self._synthesis_highpass

    @property
    def half_sample(self):
        """True if this coder uses half-sample (even-length) filters."""
        return not self._analysis_lowpass.symmetry.whole_sample

    def analysis_1d(self, signal):
        """
        Split a signal into lowpass and highpass subbands.

        Parameters
        ==========
        signal : sequence of float
            A non-empty signal.

        Returns
        =======
        (a0, a1) : (:py:class:`numpy.ndarray`, :py:class:`numpy.ndarray`)
            The lowpass subband (``ceil(N/2)`` samples) and highpass subband
            (``floor(N/2)`` samples).
        """
        if len(signal) == 0:
            raise EmptySignalError("Cannot analyse an empty signal.")

        lowpassed = self._analysis_lowpass.apply(signal)
        highpassed = self._analysis_highpass.apply(signal)

        a0 = downsample(lowpassed)
        a1 = downsample(highpassed)[:len(signal) // 2]
        return (a0, a1)

    def synthesis_1d(self, a0, a1):
        """
        Reconstruct a signal from its lowpass and highpass subbands, as
        produced by :py:meth:`analysis_1d`.

        Parameters
        ==========
        a0 : sequence of float
            The lowpass subband.
        a1 : sequence of float
            The highpass subband. Must contain the same number of samples as
            ``a0``, or one fewer.

        Returns
        =======
        signal : :py:class:`numpy.ndarray`
            The reconstructed signal of ``len(a0) + len(a1)`` samples.
        """
        if not 0 <= len(a0) - len(a1) <= 1:
            raise ShapeMismatchError(
                "Lowpass subband must have the same length as the highpass "
                "subband or be one sample longer (got {} and {}).".format(
                    len(a0), len(a1),
                )
            )

        length = len(a0) + len(a1)
        if length == 0:
            raise EmptySignalError("Cannot synthesise an empty signal.")

        lowpass_input = _synthesis_input(a0, length, self.half_sample)
        highpass_input = _synthesis_input(a1, length, self.half_sample)

        x0 = self._synthesis_lowpass.apply(
            lowpass_input,
            _channel_extension_type(self._analysis_lowpass),
        )
        x1 = self._synthesis_highpass.apply(
            highpass_input,
            _channel_extension_type(self._analysis_highpass),
        )

        # Half-sample inputs carry an extra leading sample; the bank's
        # one-sample advance leaves the trailing output surplus.
        return (x0 + x1)[:length]

    def __repr__(self):
        return "{}({!r}, {!r})".format(
            type(self).__name__,
            self._analysis_lowpass,
            self._analysis_highpass,
        )
