"""
Domain layer package.

Pure business logic with no framework or infrastructure imports.
"""
