"""
Interfaces layer package.

Contains the ErrorResponse builder and the Pydantic schemas that
define the JSON error envelope.
"""
