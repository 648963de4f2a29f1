"""projectdesk: a layered project registry."""

__version__ = "0.1.0"
