"""
Task subsystem.

Components:
- task_models.py: data structures (Task) and JSON record conversion
- errors.py: validation / storage error hierarchy
- positions.py: 1-based user positions <-> 0-based list indexes
- task_store.py: ordered in-memory list + JSON file persistence
"""
