"""Domain models and validation schemas."""
