"""
Users bounded context — domain layer.

Holds the user entity, the localized error hierarchy and the ports
the application layer depends on.
"""
