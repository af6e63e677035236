"""Infrastructure: database sessions and structured logging."""
