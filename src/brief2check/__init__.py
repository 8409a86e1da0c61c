"""
brief2check: turn free-form design instructions into a department-grouped checklist.
"""

__version__ = "0.1.0"
