"""
Domain layer package.

Contains the error entry types, domain errors and the port interfaces
for writing responses. No framework imports, no IO.
"""
