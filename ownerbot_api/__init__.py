"""
Top‑level package for the Ownerbot chat service.

This file makes ``ownerbot_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``ownerbot_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
