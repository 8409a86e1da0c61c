"""
Core pieces shared by the task pipeline and the connectors:
errors, the error banner, prompt text, ports and app state.
"""
