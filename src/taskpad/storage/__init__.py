"""
Persistence subsystem.

Components:
- slot_store.py: SQLite-backed named key/value slots
- fixture.py: bundled default task list
- mirror.py: keeps one slot in sync with the TaskStore
"""
