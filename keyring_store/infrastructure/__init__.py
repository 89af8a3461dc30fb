"""Infrastructure layer: logging and repository adapters."""
