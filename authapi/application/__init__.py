"""
Application layer package.

Use cases orchestrate domain ports. They receive validated input DTOs
and raise DomainError for every expected failure.
"""
