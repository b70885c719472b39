"""Packaged catalog data."""
