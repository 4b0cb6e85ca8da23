"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the response-writing
ports defined in the domain layer.
"""
