"""Colors, fuzzy search, secrets, custom identifiers, anchors, builders and media URLs for a chat bot."""

__version__ = "0.1.0"