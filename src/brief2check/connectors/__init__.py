"""
UI connectors (console REPL).
"""
