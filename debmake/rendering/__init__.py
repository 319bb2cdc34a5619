"""Bundled template rendering."""
