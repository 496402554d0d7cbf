"""
Jungle King - a Dou Shou Qi board game engine
"""

__version__ = "1.0.0"
