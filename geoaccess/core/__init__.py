"""Core utilities and shared infrastructure.

- config: Settings loading and validation
- config_options: Driver configuration-option store
- constants: Named constants (mode tokens, driver families, thresholds)
- exceptions: Exception taxonomy
"""
