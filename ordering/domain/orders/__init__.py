"""Orders bounded context: domain layer."""
