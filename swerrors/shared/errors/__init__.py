"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure is
answered with the same JSON error envelope.
"""
