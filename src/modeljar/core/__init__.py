"""
Core helpers: configuration, fixed constants, name and version derivation.
"""
