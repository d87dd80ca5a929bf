"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: configuration and logging in ``core``, request and
response models in ``schemas``, the upstream client in ``clients``,
business logic in ``services`` and the versioned routes in
``api/<version>/``.
"""

from .main import app  # noqa: F401
