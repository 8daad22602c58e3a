"""
moviesearch - reactive movie search screen core
"""

__version__ = "0.1.0"
