"""
Domain layer package.

Contains pure business rules: the error taxonomy, entities and
port interfaces. No framework imports, no IO, no side effects.
"""
