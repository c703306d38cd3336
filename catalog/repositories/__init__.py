"""
Persistence adapters.

These modules encapsulate how product records are stored/retrieved (the JSON
file is the source of truth; the SQL repository mirrors it for exports).
Services depend on repositories rather than touching files directly.
"""
