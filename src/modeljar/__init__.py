"""
modeljar: repackage Alfresco content-model XML files into a module JAR.
"""

__version__ = "0.1.0"
