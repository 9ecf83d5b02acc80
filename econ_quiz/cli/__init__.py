"""Command line interface for econ-quiz."""
