"""Core models, errors and logging for examine."""
