"""
Launch steps called by the CLI.
"""
