"""
Users bounded context — application layer.

Use cases for listing users and looking a user up by username.
"""
