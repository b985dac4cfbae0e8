"""
Pydantic schema definitions for API payloads.

``chat`` holds the inbound chat event and the reply body; ``service``
holds the directory record and the exported document.
"""
