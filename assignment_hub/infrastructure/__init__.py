"""Infrastructure: database access and security adapters."""
