"""Exein command line interface."""
