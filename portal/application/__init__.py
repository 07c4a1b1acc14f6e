"""Application layer: DTOs, repository ports, search services and use cases."""
