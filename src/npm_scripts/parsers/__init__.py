"""Descriptor file parsers."""
