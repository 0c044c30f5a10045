"""
Pydantic schemas shared across the repackaging pipeline.
"""
