"""Data stores.

Stores handle:
- Record collections kept in process memory
- Id generation
- The lock that makes a service operation atomic

No validation or integrity rules in stores - those belong in services.
"""
