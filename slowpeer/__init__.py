"""SLOW protocol packets, message builders and UDP transport."""

__version__ = "0.1.0"