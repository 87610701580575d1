import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "Codivo"
copyright = "2026, Codivo contributors"
author = "Codivo contributors"
import codivo

release = codivo.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "myst_parser",
]

exclude_patterns = []

autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "Codivo"
