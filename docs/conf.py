"""Sphinx configuration for hptensor documentation.
"""

import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

# Project information
project = "hptensor"
copyright = "2026, hptensor developers"
author = "hptensor developers"
release = "0.1.0"
version = "0.1.0"

# General configuration
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.doctest",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.mathjax",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

pygments_style = "sphinx"

html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "navigation_depth": 3,
    "collapse_navigation": False,
    "prev_next_buttons_location": "bottom",
}

htmlhelp_basename = "hptensordoc"

# -- Options for autodoc extension -----------------------------------------
autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "undoc-members": False,
    "show-inheritance": True,
}

# Don't show type hints in the signature
autodoc_typehints = "description"

# -- Options for autosummary extension -------------------------------------
autosummary_generate = True

# -- Options for napoleon extension ----------------------------------------
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_include_private_with_doc = True
napoleon_use_param = True
napoleon_use_rtype = True

# -- Options for intersphinx extension -------------------------------------
intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "sympy": ("https://docs.sympy.org/latest/", None),
}

# The symbolic backends print their own canonical term order; doctests compare
# against SymEngine's output.
doctest_global_setup = "from hptensor import SVHP, HTC, HT"
