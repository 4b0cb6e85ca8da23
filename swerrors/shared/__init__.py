"""
Shared module package.

Contains cross-cutting concerns used by services:
- Error handler registration
- Rate limiting
- Logging configuration
"""
