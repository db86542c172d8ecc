"""Folder crawler package."""
