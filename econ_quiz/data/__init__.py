"""Packaged sample question bank."""
