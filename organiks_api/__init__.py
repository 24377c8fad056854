"""
Top-level package for the Organiks Farm Records API.

All functionality lives in submodules under ``app``; import the
application as ``organiks_api.app.main:app``.
"""

__all__ = []
