"""
Shared module package.

Contains cross-cutting concerns used across layers:
- Error definitions and HTTP mapping
- Logging configuration
"""
