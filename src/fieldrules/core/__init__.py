"""
Core of the field validation engine: models, rule library and orchestration.
"""
