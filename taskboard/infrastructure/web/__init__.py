"""
HTTP surface: routers, dependencies and error handling.
"""
