"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskChange)
- task_store.py: ordered in-memory list + change notifications
- task_input.py: validation of user input into Task objects
- task_file.py: whole-list JSON persistence
- task_table.py: four-column table view (Title/Due/Priority/Done)
"""
