"""
Task subsystem.

Components:
- task_models.py: task variants (Todo, Deadline, Event), dates, record lines
- task_list.py: ordered in-memory collection with 1-based batch operations
- task_store.py: flat-file storage (full rewrite on every save)
"""
