"""Infrastructure adapters: database, HTTP clients, security."""
