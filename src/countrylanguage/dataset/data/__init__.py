"""Bundled reference dataset resource."""
