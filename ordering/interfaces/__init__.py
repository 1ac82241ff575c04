"""
Interfaces layer package.

Contains FastAPI routers and Pydantic response schemas.
No business logic belongs here. Routes call use cases and return responses.
"""
