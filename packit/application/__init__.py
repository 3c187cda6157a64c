"""
Application layer package.

Command and query handlers coordinate domain objects and ports.
"""
