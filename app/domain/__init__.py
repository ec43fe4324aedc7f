"""
Domain layer package.

Contains entities, localized domain errors and port interfaces.
No framework imports, no IO, no side effects.
"""
