"""Rate limiting for services using the error envelope."""
