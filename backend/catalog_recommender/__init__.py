"""Personalized game catalog recommendations"""

__version__ = "1.0.0"
