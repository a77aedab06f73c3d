"""
Command-line utilities built on :py:mod:`wsq_subband`.
"""
