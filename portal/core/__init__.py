"""Core: configuration, lifespan, limiter, exception handlers."""
