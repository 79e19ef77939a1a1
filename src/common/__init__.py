"""Shared helpers used across npmrange modules."""
