"""
Shared module package.

Cross-cutting concerns used across bounded contexts:
error mapping and logging configuration.
"""
