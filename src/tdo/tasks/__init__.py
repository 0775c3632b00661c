"""
Task subsystem.

Components:
- task_models.py: Status, Task, line parsing/serialization, row rendering
- task_store.py: Tasks collection, file read/write, todo file resolution
"""
