"""Infrastructure layer: configuration and user store adapters."""
