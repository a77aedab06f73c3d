r"""
:py:mod:`wsq_subband.signal_extension`: Symmetric signal extension
==================================================================

The filters used by the subband coder assume an infinitely long input. Real
rows and columns are finite so, rather than padding with zeros (which would
introduce a discontinuity at every edge), signals are extended by mirroring
them about their end points.

Two kinds of mirroring are supported:

Whole-sample
    The mirror axis sits *on* the end samples, so each end sample appears once
    per reflection::

        ..., s1, s0, s1, s2, ..., sN-2, sN-1, sN-2, ...

    The extended sequence has a period of :math:`2N-2`.

Half-sample
    The mirror axis sits half a sample beyond each end sample, so the end
    samples are repeated on reflection::

        ..., s1, s0, s0, s1, ..., sN-2, sN-1, sN-1, sN-2, ...

    The extended sequence has a period of :math:`2N`.

Each kind of extension also has an *antisymmetric* flavour in which every
reflection negates the mirrored samples. These are used when re-extending
highpass subbands during synthesis. A whole-sample antisymmetric extension is
only truly periodic when both end samples are zero, as is always the case for
upsampled highpass subbands.

The extensions are implemented as small iterator state machines which track a
position, a direction of travel and a sign:

.. autoclass:: WholeSampleExtension

.. autoclass:: HalfSampleExtension

Since the iterators are single-use, the following restartable iterable is
normally used instead:

.. autoclass:: SignalExtension
    :members:

.. autoclass:: ExtensionTypes
    :members:

.. autofunction:: extension_period

"""

from enum import Enum

from wsq_subband.exceptions import EmptySignalError

__all__ = [
    "ExtensionTypes",
    "WholeSampleExtension",
    "HalfSampleExtension",
    "SignalExtension",
    "extension_period",
]


class ExtensionTypes(Enum):
    """
    The four supported ways of extending a finite signal.
    """

    whole_sample_symmetric = "WS"
    half_sample_symmetric = "HS"
    whole_sample_antisymmetric = "WA"
    half_sample_antisymmetric = "HA"

    @property
    def whole_sample(self):
        """True if the mirror axes fall on the end samples."""
        return self in (
            ExtensionTypes.whole_sample_symmetric,
            ExtensionTypes.whole_sample_antisymmetric,
        )

    @property
    def antisymmetric(self):
        """True if reflected samples are negated."""
        return self in (
            ExtensionTypes.whole_sample_antisymmetric,
            ExtensionTypes.half_sample_antisymmetric,
        )


def extension_period(length, extension_type):
    """
    Return the number of samples after which an extended signal of the given
    length repeats.

    Parameters
    ==========
    length : int
        The length of the (non-empty) finite signal.
    extension_type : :py:class:`ExtensionTypes`
    """
    if length < 1:
        raise EmptySignalError("Cannot extend an empty signal.")

    if extension_type.whole_sample:
        if length == 1:
            # A lone sample is its own mirror image
            return 2 if extension_type.antisymmetric else 1
        return (2 * length) - 2
    else:
        return 2 * length


class _ExtensionIterator(object):
    """
    Common state for the extension state machines. Subclasses implement
    :py:meth:`_advance` which moves ``_index`` (and possibly ``_direction`` and
    ``_sign``) on to the next sample.
    """

    def __init__(self, signal, antisymmetric=False, periods=None):
        if len(signal) == 0:
            raise EmptySignalError("Cannot extend an empty signal.")

        self._signal = signal
        self._antisymmetric = antisymmetric

        self._index = 0
        self._direction = 1
        self._sign = 1

        self._period = extension_period(len(signal), self.extension_type)
        self._remaining_periods = periods
        self._position_in_period = 0

    @property
    def extension_type(self):
        raise NotImplementedError()

    @property
    def period(self):
        """The period of the extended sequence."""
        return self._period

    def __iter__(self):
        return self

    def __next__(self):
        if self._remaining_periods is not None and self._remaining_periods <= 0:
            raise StopIteration()

        value = self._signal[self._index]
        if self._sign < 0:
            value = -value

        self._advance()

        self._position_in_period += 1
        if self._position_in_period == self._period:
            self._position_in_period = 0
            if self._remaining_periods is not None:
                self._remaining_periods -= 1

        return value

    def _reflect(self):
        self._direction = -self._direction
        if self._antisymmetric:
            self._sign = -self._sign

    def _advance(self):
        raise NotImplementedError()


class WholeSampleExtension(_ExtensionIterator):
    """
    Iterate over the whole-sample symmetric (or antisymmetric) extension of a
    signal, starting from its first sample.

    Parameters
    ==========
    signal : sequence
        The finite (non-empty) signal to extend. Samples are read, never
        copied.
    antisymmetric : bool
        If True, negate the signal on every reflection.
    periods : int or None
        If None, the iterator is infinite. Otherwise iteration stops after the
        specified number of complete periods.
    """

    @property
    def extension_type(self):
        if self._antisymmetric:
            return ExtensionTypes.whole_sample_antisymmetric
        else:
            return ExtensionTypes.whole_sample_symmetric

    def _advance(self):
        last = len(self._signal) - 1
        if last == 0:
            self._reflect()
            return

        if self._index == last and self._direction > 0:
            self._reflect()
        elif self._index == 0 and self._direction < 0:
            self._reflect()

        # The axis sample is never revisited on reflection
        self._index += self._direction


class HalfSampleExtension(_ExtensionIterator):
    """
    Iterate over the half-sample symmetric (or antisymmetric) extension of a
    signal, starting from its first sample.

    Parameters
    ==========
    signal : sequence
        The finite (non-empty) signal to extend. Samples are read, never
        copied.
    antisymmetric : bool
        If True, negate the signal on every reflection.
    periods : int or None
        If None, the iterator is infinite. Otherwise iteration stops after the
        specified number of complete periods.
    """

    @property
    def extension_type(self):
        if self._antisymmetric:
            return ExtensionTypes.half_sample_antisymmetric
        else:
            return ExtensionTypes.half_sample_symmetric

    def _advance(self):
        last = len(self._signal) - 1
        if self._index == last and self._direction > 0:
            # Stay put: the end sample is repeated
            self._reflect()
        elif self._index == 0 and self._direction < 0:
            self._reflect()
        else:
            self._index += self._direction


class SignalExtension(object):
    """
    A restartable, lazily evaluated, infinite symmetric extension of a finite
    signal.

    Every call to :py:func:`iter` starts a fresh state machine at the first
    sample of the signal. For example::

        >>> from itertools import islice
        >>> ext = SignalExtension([1, 2, 3, 4], ExtensionTypes.whole_sample_symmetric)
        >>> list(islice(ext, 10))
        [1, 2, 3, 4, 3, 2, 1, 2, 3, 4]
        >>> list(islice(ext, 10))
        [1, 2, 3, 4, 3, 2, 1, 2, 3, 4]

    Parameters
    ==========
    signal : sequence
        The finite (non-empty) signal to extend.
    extension_type : :py:class:`ExtensionTypes`
    """

    def __init__(self, signal, extension_type):
        if len(signal) == 0:
            raise EmptySignalError("Cannot extend an empty signal.")

        self._signal = signal
        self._extension_type = extension_type

    @property
    def signal(self):
        return self._signal

    @property
    def extension_type(self):
        return self._extension_type

    @property
    def period(self):
        """The period of the extended sequence."""
        return extension_period(len(self._signal), self._extension_type)

    def __iter__(self):
        return self.periods(None)

    def periods(self, count):
        """
        Return a new iterator over the extended signal which stops after
        ``count`` complete periods (or never, if ``count`` is None).
        """
        if self._extension_type.whole_sample:
            cls = WholeSampleExtension
        else:
            cls = HalfSampleExtension
        return cls(
            self._signal,
            antisymmetric=self._extension_type.antisymmetric,
            periods=count,
        )

    def __repr__(self):
        return "{}({!r}, {})".format(
            type(self).__name__,
            self._signal,
            self._extension_type,
        )
