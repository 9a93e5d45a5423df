"""
reduces and plots per-sample split coverage tables
"""
__version__ = '0.1.0'
