"""Reusable widgets for the brewbuddy UI."""
