"""
Infrastructure adapters for the packing bounded context.

Each adapter implements a port (ABC) and connects
to external systems: databases, weather APIs.
"""
