"""Logging, configuration, errors, and small helpers shared by every other package."""
