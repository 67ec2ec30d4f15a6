"""
Command-line maintenance tools for Neon Snake.
"""
