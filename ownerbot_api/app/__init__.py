"""
Application package initializer.

The bot is organised into a few small layers: ``core`` holds
configuration, logging, persistence and error types; ``services``
holds the service directory, the command parser and the command
implementations; ``schemas`` holds the pydantic payload models and
``api`` exposes the chat webhook and read-only REST routes.
"""

from .main import app  # noqa: F401
