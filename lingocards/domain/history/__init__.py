"""History bounded context - Domain layer."""
