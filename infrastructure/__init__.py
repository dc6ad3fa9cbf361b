"""Infrastructure layer: MongoDB persistence, configuration and logging."""
