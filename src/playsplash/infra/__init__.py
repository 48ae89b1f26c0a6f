"""
Infrastructure layer - logging, settings and error types.
"""
