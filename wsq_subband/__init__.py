"""
The :py:mod:`wsq_subband` module implements the analysis and synthesis stages
of a two-channel wavelet filter bank of the kind used by WSQ-style picture
compressors. A picture is decomposed into four subbands (an approximation and
three detail bands) from which the original picture may be reconstructed to
within floating point precision.

..
    You are currently reading the documentation in its source form (e.g.
    directly from the Python source docstrings or via ``help()``).


Main components
---------------

From the bottom up, the software consists of:

* Symmetric signal extension (:py:mod:`wsq_subband.signal_extension`) which
  mirrors finite signals about their end points so that filters never see an
  artificial discontinuity at a picture edge.
* Symmetric and antisymmetric FIR filters (:py:mod:`wsq_subband.filters`),
  including the boundary-aware convolution routine and the derivation of
  synthesis filters from analysis filters.
* A one-dimensional two-channel subband coder
  (:py:mod:`wsq_subband.subband_coder`) along with a table of predefined
  filter banks (:py:mod:`wsq_subband.tables`).
* A floating point picture container (:py:mod:`wsq_subband.float_image`) and
  the separable 2-D and multi-level transforms built on it
  (:py:mod:`wsq_subband.wavelet_filtering`).

Reading and writing picture files is handled by
:py:mod:`wsq_subband.file_format` and the :ref:`wsq-subband-roundtrip`
command.


Boundary handling
-----------------

Rows and columns are finite but the filters assume infinitely long inputs.
During analysis, signals are extended symmetrically according to the sample
parity of the filters. The filtered outputs then inherit the (anti)symmetry of
the filters and so, after subsampling, only half of the samples need be kept.
During synthesis the subbands are re-extended with exactly this inherited
symmetry. As a result the transform is non-expansive: a picture of ``W`` by
``H`` samples always produces a total of ``W * H`` subband samples.


Perfect reconstruction
----------------------

Perfect reconstruction is only achieved when the two analysis filters form a
complementary pair. This is not checked: non-complementary filters silently
produce pictures which differ from the input. The filter banks listed in
:py:data:`wsq_subband.tables.FILTER_BANKS` are all complementary half-sample
(even-length) banks.

"""

from wsq_subband.version import __version__
