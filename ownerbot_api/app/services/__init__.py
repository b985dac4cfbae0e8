"""
Service layer.

The service directory, the command parser and the chat commands live
here, kept apart from the HTTP layer so they can be driven directly
from tests or scripts.
"""
