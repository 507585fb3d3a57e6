"""
Task subsystem.

Components:
- task_models.py: data structures (Task, null_task sentinel)
- task_codec.py: one-line-per-task text format for the tasks file
- task_store.py: in-memory list + id allocation + full-file persistence
- task_api.py: validation helpers the request handlers go through
"""
