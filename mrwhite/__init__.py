"""
Mr. White: pass-and-play party game engine.
"""

__version__ = "0.1.0"
