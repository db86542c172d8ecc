"""Folder crawler core logic."""
