"""CLI modules for cronparse.

    - common: Shared infrastructure (options, output, errors)
"""
