"""Domain layer: protocols (ports) and value objects."""
