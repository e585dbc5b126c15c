"""
Domain layer - entities, events and errors.

This package contains:
- Entities: Dataclasses for every workforce record
- Events: State-change notifications
- Exceptions: Domain error taxonomy
"""
