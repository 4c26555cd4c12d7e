"""External service providers."""
