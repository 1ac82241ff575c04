"""
Application layer package.

Each use case is a single class with one public method.
This layer depends on domain ports, never on infrastructure.
"""
