"""
lanelayout - validate bowling center lane layouts and derive lane pairs.
"""

__version__ = "0.1.0"
