"""
Top‑level package for the Catalog API.

This file makes ``catalog_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``catalog_api.app.main``.  Tests and the ``run.py`` launcher rely on
these names when running outside of the package root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
