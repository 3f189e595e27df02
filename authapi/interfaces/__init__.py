"""
Interfaces layer package.

FastAPI routers and the schemas that describe request and response
payloads. Routes delegate to use cases; no business logic here.
"""
