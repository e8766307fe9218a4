"""Domain layer — types, records, errors, simulation and parsing.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
