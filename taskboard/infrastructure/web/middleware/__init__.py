"""
HTTP middleware and error handling.
"""
