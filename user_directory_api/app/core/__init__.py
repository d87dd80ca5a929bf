"""
Cross-cutting infrastructure: settings, logging and domain errors.
"""
