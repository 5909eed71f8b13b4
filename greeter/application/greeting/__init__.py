"""
Application layer for the greeting bounded context.
"""
