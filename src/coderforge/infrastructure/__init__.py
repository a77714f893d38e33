"""Infrastructure layer - logging and the HTTP client."""
