"""Consistency checks."""
