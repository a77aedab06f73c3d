"""
:py:mod:`wsq_subband.wavelet_filtering`: 2-D separable subband coding
=====================================================================

This module extends the one-dimensional
:py:class:`~wsq_subband.subband_coder.TwoChannelSubbandCoder` to pictures
(:py:class:`~wsq_subband.float_image.FloatImage`) by filtering first along
every row and then along every column of the two resulting row subbands.

Subband naming follows the order in which filters are applied: the first
letter gives the row (horizontal) filter and the second the column (vertical)
filter. For example ``LH`` has been lowpass filtered along its rows and
highpass filtered along its columns. For a ``W`` by ``H`` picture the subband
dimensions are:

====  ===============  ===============
Band  Width            Height
====  ===============  ===============
LL    ``ceil(W/2)``    ``ceil(H/2)``
LH    ``ceil(W/2)``    ``floor(H/2)``
HL    ``floor(W/2)``   ``ceil(H/2)``
HH    ``floor(W/2)``   ``floor(H/2)``
====  ===============  ===============

Every picture produced by this module has its declared sample range set to
the observed range of its samples.

Single level
------------

.. autofunction:: analysis

.. autofunction:: synthesis

.. autofunction:: row_analysis

.. autofunction:: column_analysis

.. autofunction:: row_synthesis

.. autofunction:: column_synthesis

Multi-level
-----------

.. autofunction:: dwt

.. autofunction:: idwt
"""

import logging

import numpy as np

from wsq_subband.exceptions import ShapeMismatchError

from wsq_subband.float_image import FloatImage

__all__ = [
    "idwt",
    "dwt",
    "synthesis",
    "analysis",
    "row_synthesis",
    "row_analysis",
    "column_synthesis",
    "column_analysis",
]


def _new_image(array):
    image = FloatImage.from_array(array)
    image.find_and_set_min_max()
    return image


def _transposed(image):
    image = image.copy()
    image.rotate()
    return image


def idwt(coder, coeff_data):
    """
    Inverse multi-level transform.

    Parameters
    ==========
    coder : :py:class:`~wsq_subband.subband_coder.TwoChannelSubbandCoder`
    coeff_data : {level: {orientation: :py:class:`~wsq_subband.float_image.FloatImage`, ...}, ...}
        The transform coefficients, as produced by :py:func:`dwt`.

    Returns
    =======
    picture : :py:class:`~wsq_subband.float_image.FloatImage`
        The synthesized picture.
    """
    DC_band = coeff_data[0]["LL"]
    for n in range(1, max(coeff_data) + 1):
        logging.debug("Synthesizing level %d", n)
        DC_band = synthesis(
            coder,
            DC_band,
            coeff_data[n]["LH"],
            coeff_data[n]["HL"],
            coeff_data[n]["HH"],
        )
    return DC_band


def dwt(coder, picture, depth):
    """
    Multi-level transform, inverse of :py:func:`idwt`.

    The LL band is repeatedly analysed ``depth`` times. Level ``depth`` holds
    the first (finest) decomposition and level 0 holds only the final LL band.

    Parameters
    ==========
    coder : :py:class:`~wsq_subband.subband_coder.TwoChannelSubbandCoder`
    picture : :py:class:`~wsq_subband.float_image.FloatImage`
    depth : int
        The number of decomposition levels. Zero leaves the picture untouched.

    Returns
    =======
    coeff_data : {level: {orientation: :py:class:`~wsq_subband.float_image.FloatImage`, ...}, ...}
        Level 0 contains the "LL" band, levels 1 to ``depth`` contain "LH",
        "HL" and "HH" bands.
    """
    coeff_data = {}

    DC_band = picture
    for n in reversed(range(1, depth + 1)):
        logging.debug(
            "Analysing level %d (%dx%d)", n, DC_band.width, DC_band.height
        )
        (LL_data, LH_data, HL_data, HH_data) = analysis(coder, DC_band)
        DC_band = LL_data
        coeff_data[n] = {}
        coeff_data[n]["LH"] = LH_data
        coeff_data[n]["HL"] = HL_data
        coeff_data[n]["HH"] = HH_data
    coeff_data[0] = {}
    coeff_data[0]["LL"] = DC_band

    return coeff_data


def analysis(coder, picture):
    """
    Single level 2-D analysis.

    Returns a tuple (LL_data, LH_data, HL_data, HH_data)
    """
    (L_data, H_data) = row_analysis(coder, picture)
    (LL_data, LH_data) = column_analysis(coder, L_data)
    (HL_data, HH_data) = column_analysis(coder, H_data)
    return (LL_data, LH_data, HL_data, HH_data)


def synthesis(coder, LL_data, LH_data, HL_data, HH_data):
    """Single level 2-D synthesis, inverse of :py:func:`analysis`."""
    L_data = column_synthesis(coder, LL_data, LH_data)
    H_data = column_synthesis(coder, HL_data, HH_data)
    return row_synthesis(coder, L_data, H_data)


def row_analysis(coder, picture):
    """
    Apply 1-D analysis to every row of a picture.

    Returns a tuple (L_data, H_data) of pictures with the same height as the
    input.
    """
    L_data = np.zeros((picture.height, (picture.width + 1) // 2))
    H_data = np.zeros((picture.height, picture.width // 2))
    for y, row in enumerate(picture.rows()):
        L_data[y], H_data[y] = coder.analysis_1d(row)
    return (_new_image(L_data), _new_image(H_data))


def column_analysis(coder, picture):
    """
    Apply 1-D analysis to every column of a picture.

    Returns a tuple (L_data, H_data) of pictures with the same width as the
    input.
    """
    (L_data, H_data) = row_analysis(coder, _transposed(picture))
    L_data.rotate()
    H_data.rotate()
    return (L_data, H_data)


def row_synthesis(coder, L_data, H_data):
    """
    Apply 1-D synthesis to every pair of rows in two row subbands, inverse of
    :py:func:`row_analysis`.
    """
    if L_data.height != H_data.height:
        raise ShapeMismatchError(
            "Row subbands have different heights ({} and {}).".format(
                L_data.height, H_data.height,
            )
        )
    if not 0 <= L_data.width - H_data.width <= 1:
        raise ShapeMismatchError(
            "Lowpass row subband must be as wide as the highpass subband or "
            "one sample wider (got {} and {}).".format(
                L_data.width, H_data.width,
            )
        )

    synth = np.zeros((L_data.height, L_data.width + H_data.width))
    for y, (L_row, H_row) in enumerate(zip(L_data.rows(), H_data.rows())):
        synth[y] = coder.synthesis_1d(L_row, H_row)
    return _new_image(synth)


def column_synthesis(coder, L_data, H_data):
    """
    Apply 1-D synthesis to every pair of columns in two column subbands,
    inverse of :py:func:`column_analysis`.
    """
    if L_data.width != H_data.width:
        raise ShapeMismatchError(
            "Column subbands have different widths ({} and {}).".format(
                L_data.width, H_data.width,
            )
        )
    synth = row_synthesis(coder, _transposed(L_data), _transposed(H_data))
    synth.rotate()
    return synth
