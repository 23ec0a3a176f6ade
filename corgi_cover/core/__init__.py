"""Core enums and errors shared across the application."""
