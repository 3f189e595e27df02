"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure is
reported once and answered with the same JSON body shape.
"""
