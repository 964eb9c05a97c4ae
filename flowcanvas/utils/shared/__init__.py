"""Shared utilities (configuration persistence)."""
