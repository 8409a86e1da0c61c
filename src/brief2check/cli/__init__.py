"""
Command-line surface: entry point, composition root and slash commands.
"""
