"""
Domain layer package.

Entities, port interfaces and errors. No framework imports, no IO.
"""
