"""Renderers for the holiday card."""
