"""Flatten a crate documentation model into a single cross-referenced JSON document."""
