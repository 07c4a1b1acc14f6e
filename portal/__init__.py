"""Customer-service portal search API."""
