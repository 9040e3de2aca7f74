"""
Task subsystem.

Components:
- task_models.py: Task dataclass + JSON array codec for the mirror
- task_store.py: in-memory list/selection owner with write-through persistence
"""
