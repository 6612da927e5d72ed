"""Services Layer — book record operations over the repository protocol.

Invariants:
    - Services depend on core/ protocols, never on a concrete session
"""
