"""Headless pipeline: district data loading, lookup, and report export."""
