"""Shared utilities: request context, telemetry, id generators."""
