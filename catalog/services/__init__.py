"""
High-level use cases for the product catalog.

Service modules orchestrate repositories to implement business rules
(id assignment, code uniqueness, not-found handling). Callers use these
services instead of manipulating the JSON file directly.
"""
