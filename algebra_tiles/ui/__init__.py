"""Presentation constants for the external drawing layer."""
