"""
Core mathematical primitives.

Pure functions without state or external dependencies on runtimes.
"""
