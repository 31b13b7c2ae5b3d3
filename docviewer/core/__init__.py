"""Core document tree functionality."""
