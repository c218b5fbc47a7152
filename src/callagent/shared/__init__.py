"""
Shared utilities: structured logging and domain exceptions.
"""
