"""Domain layer: exceptions and enums (no framework imports)."""
