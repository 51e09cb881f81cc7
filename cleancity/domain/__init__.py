"""Domain layer for the CleanCity application."""
