"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Progress, department ordering)
- extractor.py: pulls the JSON object out of raw provider text
- validator.py: structural checks on the parsed payload
- normalizer.py: coerces validated payloads into Task records
- task_store.py: the live, index-addressed collection edited by the user
- text_check.py: advisory per-field validation + debounce
- export.py: plain-text export of a department
- task_api.py: the parse pipeline used by the rest of the app
"""
