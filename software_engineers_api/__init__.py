"""
Top‑level package for the Software Engineers API.

This file makes ``software_engineers_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``software_engineers_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
