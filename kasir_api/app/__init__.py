"""
Application package initializer.

The code is split by layer: ``repositories`` store products,
``services`` sit on top of a repository, ``api`` maps HTTP routes onto
the service, and ``core`` holds configuration, logging, database
bootstrap and error handling.  ``main.create_app`` wires them together.
"""

from .main import create_app  # noqa: F401
