"""
depsync — pin package.json dependencies to their installed versions.
"""

__version__ = "0.1.0"
