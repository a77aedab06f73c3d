r"""
.. _wsq-subband-roundtrip:

``wsq-subband-roundtrip``
=========================

A command-line utility which decomposes a greyscale picture into subbands and
reconstructs it again, reporting how closely the reconstruction matches the
original.

Usage
-----

Given a greyscale picture in any format readable by PIL (e.g. PGM or PNG)::

    $ wsq-subband-roundtrip picture.pgm --filter-bank haar --depth 3
    Maximum absolute error: 2.27e-13
    PSNR: 300.9 dB
    Reconstruction OK

The picture may optionally be normalised (centred on its mean and scaled to
roughly +/-128) before analysis using ``--normalize``. Errors are always
reported in terms of the original sample values.

With ``--output-dir`` every subband is written to the specified directory as
a PNG named ``level_<n>_<orientation>.png``, scaled to fill the picture's
sample range.

The exit status is zero when every reconstructed sample is within
:py:data:`TOLERANCE` of the original and 4 otherwise.

"""

import os
import sys
import logging

from argparse import ArgumentParser, ArgumentTypeError

import numpy as np

from wsq_subband import __version__

from wsq_subband.tables import FilterBanks

from wsq_subband.subband_coder import TwoChannelSubbandCoder

from wsq_subband.float_image import FloatImage

from wsq_subband.wavelet_filtering import dwt, idwt

from wsq_subband.file_format import read_picture, write_subbands

__all__ = [
    "TOLERANCE",
    "psnr",
    "roundtrip",
    "main",
]


TOLERANCE = 1e-3
"""
The largest reconstruction error (in sample values) considered a successful
reconstruction.
"""


def non_negative_int(string):
    value = int(string)
    if value < 0:
        raise ArgumentTypeError("must be zero or greater")
    return value


def parse_args(*args, **kwargs):
    parser = ArgumentParser(
        description="""
        Decompose a greyscale picture into wavelet subbands and reconstruct
        it, reporting the reconstruction error.
    """
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    parser.add_argument(
        "picture",
        help="""
            The filename of a greyscale picture to decompose.
        """,
    )

    parser.add_argument(
        "--filter-bank",
        "-f",
        choices=[filter_bank.name for filter_bank in FilterBanks],
        default=FilterBanks.biorthogonal_1_5.name,
        help="""
            The analysis filter bank to use (default: %(default)s).
        """,
    )

    parser.add_argument(
        "--depth",
        "-d",
        type=non_negative_int,
        default=1,
        help="""
            The number of decomposition levels (default: %(default)s).
        """,
    )

    parser.add_argument(
        "--normalize",
        "-n",
        action="store_true",
        default=False,
        help="""
            Normalise the picture to its mean and a range of roughly +/-128
            before analysis.
        """,
    )

    parser.add_argument(
        "--output-dir",
        "-o",
        type=str,
        metavar="DIRECTORY",
        help="""
            Write every subband as a PNG into this directory (which will be
            created if necessary).
        """,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="""
            Show additional status information during execution.
        """,
    )

    return parser.parse_args(*args, **kwargs)


def psnr(deltas, max_value):
    """
    Compute the peak signal to noise ratio (in dB) given a series of error
    values and associated maximum signal value.

    Returns None if the deltas are zero.
    """
    mean_square_error = np.mean(deltas * deltas)
    if mean_square_error == 0:
        return None
    else:
        return (20 * (np.log(max_value) / np.log(10))) - (
            10 * (np.log(mean_square_error) / np.log(10))
        )


def roundtrip(picture, coder, depth, normalize=False):
    """
    Decompose and reconstruct a picture.

    Parameters
    ==========
    picture : :py:class:`~wsq_subband.float_image.FloatImage`
        The picture to transform. This is not modified.
    coder : :py:class:`~wsq_subband.subband_coder.TwoChannelSubbandCoder`
    depth : int
        Number of decomposition levels.
    normalize : bool
        If True, normalise the picture before analysis and undo the
        normalisation after synthesis.

    Returns
    =======
    (coeff_data, reconstruction)
        The subbands produced by :py:func:`~wsq_subband.wavelet_filtering.dwt`
        and the reconstructed :py:class:`~wsq_subband.float_image.FloatImage`
        (in the original picture's sample range).
    """
    working = picture.copy()

    if normalize:
        mean, rescale = working.get_mean_and_rescale()
        logging.info("Normalizing with mean %s and rescale %s", mean, rescale)
        working.normalize(mean, rescale)
        working.find_and_set_min_max()

    coeff_data = dwt(coder, working, depth)
    reconstruction = idwt(coder, coeff_data).copy()

    if normalize:
        reconstruction.data *= rescale
        reconstruction.data += mean

    reconstruction.min_value = picture.min_value
    reconstruction.max_value = picture.max_value

    return (coeff_data, reconstruction)


def main(*args, **kwargs):
    args = parse_args(*args, **kwargs)

    log_level = logging.WARNING
    if args.verbose >= 2:
        log_level = logging.DEBUG
    elif args.verbose >= 1:
        log_level = logging.INFO
    logging.basicConfig(level=log_level)

    try:
        samples, max_value = read_picture(args.picture)
    except (OSError, ValueError) as e:
        sys.stderr.write("Error: Could not read {}: {}\n".format(args.picture, e))
        return 1

    picture = FloatImage.from_integer_samples(samples, max_value)
    if picture.width == 0 or picture.height == 0:
        sys.stderr.write("Error: {} is an empty picture.\n".format(args.picture))
        return 2

    coder = TwoChannelSubbandCoder.from_table(FilterBanks[args.filter_bank])
    logging.info(
        "Transforming %dx%d picture using %s filter bank, depth %d",
        picture.width,
        picture.height,
        args.filter_bank,
        args.depth,
    )

    coeff_data, reconstruction = roundtrip(
        picture,
        coder,
        args.depth,
        args.normalize,
    )

    if args.output_dir is not None:
        os.makedirs(args.output_dir, exist_ok=True)
        write_subbands(coeff_data, args.output_dir, max_value)

    deltas = reconstruction.data - picture.data
    max_error = float(np.max(np.abs(deltas)))
    picture_psnr = psnr(deltas, max_value)

    print("Maximum absolute error: {:.3g}".format(max_error))
    if picture_psnr is None:
        print("PSNR: infinite (identical)")
    else:
        print("PSNR: {:.1f} dB".format(picture_psnr))

    if max_error <= TOLERANCE:
        print("Reconstruction OK")
        return 0
    else:
        print("Reconstruction FAILED")
        return 4


if __name__ == "__main__":
    sys.exit(main())
