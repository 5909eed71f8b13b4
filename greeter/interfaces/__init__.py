"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
and request decoding. No business logic belongs here.
Routes call use cases and return responses.
"""
