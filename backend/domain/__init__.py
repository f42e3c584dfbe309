"""Domain layer for the menu training back office.

Entities, value objects and pure rules (allergy derivation, tenancy,
business identifiers). No I/O happens here.
"""
