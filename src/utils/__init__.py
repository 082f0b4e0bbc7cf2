"""Shared helpers: logging, errors, clock, output and formatting."""
