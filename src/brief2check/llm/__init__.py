"""
Transport collaborators: concrete LLMClient implementations.
"""
