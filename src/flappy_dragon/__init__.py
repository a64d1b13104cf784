"""
Flappy Dragon: a side-scrolling console arcade game in five editions.
"""

__version__ = "0.5.0"
