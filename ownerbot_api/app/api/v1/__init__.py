"""
Version 1 of the API.

Holds the chat webhook and the read-only service directory routes.
"""
