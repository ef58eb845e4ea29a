"""Serve documentation bundles of Maven artifacts over HTTP."""

__version__ = "0.1.0"
