"""
Why Am I Flying? A single-player flap-through-the-pipes game.
"""

__version__ = "1.0.0"
