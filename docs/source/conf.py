# Configuration file for the Sphinx documentation builder.

import os
import sys

sys.path.insert(0, os.path.abspath("../.."))

# -- Project information -----------------------------------------------------

project = "WSQ Subband Coder"
copyright = "2026, WSQ Subband Coder contributors"
author = "WSQ Subband Coder contributors"

from wsq_subband import __version__ as version

release = version

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.doctest",
    "sphinx.ext.mathjax",
    "numpydoc",
]

numpydoc_show_class_members = False

autodoc_member_order = "bysource"

add_module_names = False

intersphinx_mapping = {
    "python": ("http://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "PIL": ("https://pillow.readthedocs.io/en/stable/", None),
}

# -- Options for HTML output -------------------------------------------------

html_theme = "nature"

# -- Options for LaTeX output ------------------------------------------------

latex_elements = {
    "papersize": "a4paper",
}
