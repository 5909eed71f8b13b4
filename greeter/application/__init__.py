"""
Application layer package.

Use cases coordinate domain ports to fulfill operations.
No framework or infrastructure imports allowed.
"""
