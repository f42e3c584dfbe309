"""User domain module.

Identity of the calling actor, roles, and the user side of the
user-restaurant membership relation. Authentication itself is delegated to
an external identity provider.
"""
