"""wirecoerce: typed decoding of access-control wire payloads."""

__version__ = "0.1.0"
