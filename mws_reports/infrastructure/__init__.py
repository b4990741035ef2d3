"""Infrastructure layer - logging and report adapters."""
