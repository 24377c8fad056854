"""
Application package initializer.

The package is organised by layer: ``core`` (configuration, logging,
database, exceptions), ``schemas`` (record and payload models),
``store`` (id allocation and the persistent entity stores),
``services`` (record operations) and ``api`` (versioned HTTP routes).
"""

from .main import app  # noqa: F401
