"""
Truco - the Brazilian card game, played in the terminal against the computer.
"""

__version__ = "0.1.0"
