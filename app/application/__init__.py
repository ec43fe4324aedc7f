"""
Application layer package.

Contains use cases that orchestrate domain logic. Each use case is a
single class with an ``execute`` method and receives its ports through
the constructor. This layer never imports infrastructure.
"""
