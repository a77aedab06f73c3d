"""
The :py:mod:`wsq_subband.file_format` module contains functions for reading
and writing greyscale pictures (e.g. PGM or PNG files) using :py:mod:`PIL`.

Pictures are exchanged as 2-D ``(height, width)`` arrays of non-negative
integer samples along with the maximum sample value (255 for 8-bit pictures
and 65535 for 16-bit pictures).

.. autofunction:: read_picture

.. autofunction:: write_picture

.. autofunction:: write_subbands

"""

import os

import logging

import numpy as np

from PIL import Image


__all__ = [
    "read_picture",
    "write_picture",
    "write_subbands",
]


SIXTEEN_BIT_MODES = ("I;16", "I;16B", "I;16L", "I")
"""
PIL image modes which are read as 16-bit greyscale samples.
"""


def read_picture(filename):
    """
    Read a greyscale picture from a file.

    Colour pictures are converted to greyscale. 16-bit greyscale pictures are
    read at full precision; anything else is read as 8-bit samples.

    Returns
    =======
    (samples, max_value)
        ``samples`` is a 2-D :py:mod:`numpy` integer array indexed as
        ``[y, x]``. ``max_value`` is the largest representable sample value.
    """
    with Image.open(filename) as image:
        if image.mode in SIXTEEN_BIT_MODES:
            samples = np.array(image, dtype=np.int64)
            max_value = 65535
        else:
            samples = np.array(image.convert("L"), dtype=np.int64)
            max_value = 255

    logging.info(
        "Read %dx%d picture from %s (max value %d)",
        samples.shape[1],
        samples.shape[0],
        filename,
        max_value,
    )

    return (samples, max_value)


def write_picture(samples, max_value, filename):
    """
    Write a greyscale picture to a file. The file format is chosen by PIL
    based on the filename's extension.

    Parameters
    ==========
    samples : 2-D array of int
        Samples in the range ``0`` to ``max_value``, indexed as ``[y, x]``.
    max_value : int
        Pictures with a ``max_value`` up to 255 are written as 8-bit
        pictures, otherwise as 16-bit pictures.
    filename : str
    """
    samples = np.clip(np.asarray(samples), 0, max_value)
    if max_value <= 255:
        image = Image.fromarray(samples.astype(np.uint8))
    else:
        image = Image.fromarray(samples.astype(np.uint16))

    image.save(filename)


def write_subbands(coeff_data, output_dir, max_value=255):
    """
    Write every subband produced by :py:func:`~wsq_subband.wavelet_filtering.dwt`
    as a picture named ``level_<n>_<orientation>.png`` in ``output_dir``.

    Each subband is scaled so that its declared sample range fills the
    ``0`` to ``max_value`` range. Empty subbands (which arise for pictures
    only one sample wide or high) are skipped.

    Returns
    =======
    filenames : [str, ...]
        The names of the files written.
    """
    filenames = []
    for level, orientations in sorted(coeff_data.items()):
        for orientation, band in sorted(orientations.items()):
            if band.width == 0 or band.height == 0:
                continue

            filename = os.path.join(
                output_dir,
                "level_{}_{}.png".format(level, orientation),
            )
            write_picture(band.to_integer_samples(max_value), max_value, filename)
            logging.info("Wrote %s", filename)
            filenames.append(filename)

    return filenames
