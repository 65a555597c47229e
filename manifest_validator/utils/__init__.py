"""Shared helpers: logging setup and source positions."""
