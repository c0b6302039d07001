"""
Domain layer: the User entity, its repository port and conflict errors.
"""
