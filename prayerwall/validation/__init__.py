"""Structural validation for submission forms, wrapping the content filter."""
