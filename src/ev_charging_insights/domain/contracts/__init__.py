"""Protocols shared between presentation adapters."""
