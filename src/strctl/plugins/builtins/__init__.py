"""Plugins shipped with strctl."""
