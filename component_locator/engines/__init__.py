"""Locator engines."""
