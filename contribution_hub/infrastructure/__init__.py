"""Infrastructure adapters for persistence, security, and logging."""
