"""AI Addiction Network - a turn-based black market trading game"""

__version__ = "0.1.0"
