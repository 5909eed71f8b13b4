"""
Greeting bounded context, domain layer.

Contains the greeting capability (port), its base implementation,
and the errors it can raise.
"""
