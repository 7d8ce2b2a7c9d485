"""
Application package initializer.

The project is split into small layers: ``models`` holds the entity,
``repositories`` the persistence code, ``services`` the use cases and
``api`` the HTTP routes.  ``core`` contains configuration, logging and
database helpers shared by all of them.
"""

from .main import app  # noqa: F401
