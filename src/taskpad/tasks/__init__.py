"""
Task subsystem.

Components:
- task_models.py: data structures (Task, EditDraft)
- task_store.py: in-memory task list + edit draft, with change listeners
"""
