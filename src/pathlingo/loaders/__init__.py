"""Slug map discovery from page and content files."""
