"""
Infrastructure layer: persistence, outbound HTTP and the web surface.
"""
