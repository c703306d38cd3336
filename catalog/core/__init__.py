"""
Core utilities shared across the catalog package.

This package hosts configuration (env vars, file paths) and logging setup.
Repositories and services depend on these primitives instead of reading the
environment themselves.
"""
