"""Command-line interface for harvestrx."""
