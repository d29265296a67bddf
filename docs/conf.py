"""Sphinx configuration for unutf16 documentation."""

import unutf16

project = "unutf16"
copyright = "2026, unutf16 contributors"
author = "unutf16 contributors"
release = unutf16.__version__
version = ".".join(release.split(".")[:2])

# intersphinx resolves the stdlib exceptions and io classes named in docstrings.
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
]

exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
