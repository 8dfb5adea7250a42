"""A read-only terminal text viewer, with raw-mode key handling and two small terminal tools."""

__version__ = "0.1.0"