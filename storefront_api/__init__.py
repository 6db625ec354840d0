"""
Top‑level package for the Storefront API.

This file makes ``storefront_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``storefront_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
