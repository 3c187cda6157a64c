"""
Application layer for the packing bounded context.

Handlers coordinate domain entities and ports to fulfill
business operations. No framework or infrastructure imports allowed.
"""
