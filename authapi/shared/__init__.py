"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error reporting boundary
- Request validation pipeline
- Request lifecycle middleware
- Security middleware and rate limiting
- Logging configuration
"""
