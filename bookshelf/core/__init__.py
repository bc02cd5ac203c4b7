"""
Core domain: models, validation rules and error types.
"""
