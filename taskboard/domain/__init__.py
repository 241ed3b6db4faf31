"""
Domain layer: entities, repository ports and domain services.
"""
