"""Services Layer — orchestration between the validation gate and the store.

Invariants:
    - Services hold no state beyond their collaborators
    - Services depend on core Protocols, never on infrastructure classes
"""
