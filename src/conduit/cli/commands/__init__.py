"""Conduit CLI commands."""
