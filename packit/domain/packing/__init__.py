"""
Packing bounded context — domain layer.

This module contains all domain logic for the packing context:
- The PackingList aggregate and its items
- Trip descriptors (travel days, temperature, localization)
- Packing-item policies and the factory that applies them
"""
