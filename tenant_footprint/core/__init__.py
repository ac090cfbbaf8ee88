"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (earth radius, unit conversions, tile layers)
- exceptions: Custom exception hierarchy
- workspace: In-memory polygon and tenant records
"""
