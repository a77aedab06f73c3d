"""
:py:mod:`wsq_subband.tables`: Filter bank tables
================================================

Predefined complementary analysis filter pairs which may be used to construct
a :py:class:`~wsq_subband.subband_coder.TwoChannelSubbandCoder`.

All of the filter banks below are half-sample (even-length) biorthogonal
banks with a half-sample symmetric lowpass filter and a half-sample
antisymmetric highpass filter. Only the stored (right-hand) half of each
filter is listed; see :py:mod:`wsq_subband.filters` for the layout.

A pair is complementary when, writing :math:`P(z) = H_0(z) H_1(-z)`, every
odd power of :math:`z` in :math:`P` has a zero coefficient except :math:`z^1`
whose coefficient is one.
"""

from enum import IntEnum

from collections import namedtuple

from math import sqrt

from wsq_subband.filters import Filter, SymmetryTypes

__all__ = [
    "FilterBanks",
    "FilterBankParameters",
    "FILTER_BANKS",
]


class FilterBanks(IntEnum):
    """
    Indices of the predefined filter banks in :py:data:`FILTER_BANKS`.
    """

    haar = 0
    biorthogonal_1_3 = 1
    biorthogonal_1_5 = 2
    biorthogonal_3_1 = 3


FilterBankParameters = namedtuple("FilterBankParameters", "lowpass,highpass")
"""
A complementary pair of analysis filters.

Parameters
----------
lowpass
    The analysis lowpass :py:class:`~wsq_subband.filters.Filter`.
highpass
    The analysis highpass :py:class:`~wsq_subband.filters.Filter`.
"""

_HSS = SymmetryTypes.half_sample_symmetric
_HSA = SymmetryTypes.half_sample_antisymmetric

_ROOT_HALF = sqrt(2) / 2

FILTER_BANKS = {
    FilterBanks.haar: FilterBankParameters(
        lowpass=Filter([_ROOT_HALF], _HSS),
        highpass=Filter([_ROOT_HALF], _HSA),
    ),
    FilterBanks.biorthogonal_1_3: FilterBankParameters(
        lowpass=Filter(
            [sqrt(2) * c for c in (1/2, 1/16, -1/16)],
            _HSS,
        ),
        highpass=Filter([_ROOT_HALF], _HSA),
    ),
    FilterBanks.biorthogonal_1_5: FilterBankParameters(
        lowpass=Filter(
            [sqrt(2) * c for c in (1/2, 22/256, -22/256, -3/256, 3/256)],
            _HSS,
        ),
        highpass=Filter([_ROOT_HALF], _HSA),
    ),
    FilterBanks.biorthogonal_3_1: FilterBankParameters(
        lowpass=Filter([(sqrt(2) / 4) * c for c in (3, -1)], _HSS),
        highpass=Filter([(sqrt(2) / 8) * c for c in (3, -1)], _HSA),
    ),
}
"""
Lookup from :py:class:`FilterBanks` to :py:class:`FilterBankParameters`.
"""
