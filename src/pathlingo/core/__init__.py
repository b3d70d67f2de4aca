"""Slug and path translation core."""
