"""Sphinx configuration for the stellartime documentation."""

from __future__ import annotations

# stellartime Imports
import stellartime

# -- Project information -----------------------------------------------------

project = "stellartime"
author = "stellartime developers"
release = stellartime.__version__
version = ".".join(release.split(".")[:2])

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinxcontrib.bibtex",
    "sphinx_gallery.gen_gallery",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "gallery/*.ipynb"]

autodoc_member_order = "bysource"
autosummary_generate = True
napoleon_google_docstring = True
napoleon_numpy_docstring = False

# Bibliography used by the ``:cite:t:`` roles in docstrings
bibtex_bibfiles = ["reference/stellartime.bib"]
bibtex_default_style = "plain"
bibtex_reference_style = "author_year"

sphinx_gallery_conf = {
    "examples_dirs": "examples",
    "gallery_dirs": "gallery",
    "filename_pattern": r"plot_",
    "download_all_examples": False,
}

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
