"""
Writing the output module JAR.
"""
