"""Command line interface for ladder."""
