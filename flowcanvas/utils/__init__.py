"""Utility helpers shared across flowcanvas layers."""
