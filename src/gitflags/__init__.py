""" Translate --flag=value arguments into git commands.

"""

__version__ = "0.1.0"
