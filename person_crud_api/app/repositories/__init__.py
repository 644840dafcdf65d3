"""
Persistence layer.

Repositories own all SQL.  Services receive a repository instance and
never open connections themselves.
"""
