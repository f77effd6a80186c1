"""
hypertodo - a server-rendered to-do list for htmx front ends.
"""

__version__ = "0.1.0"
