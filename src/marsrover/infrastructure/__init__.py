"""Infrastructure layer — source loading."""
