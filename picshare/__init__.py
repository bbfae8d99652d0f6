"""Picshare: a photo feed built on a Model-View-Update core."""

__version__ = "0.1.0"
