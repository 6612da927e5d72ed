"""Database Package — declarative base shared by models and migrations.

Invariants:
    - No engine or session is created at import time
"""
