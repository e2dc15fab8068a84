"""Discrete-event simulation of rumors spreading among people moving between places."""

__version__ = "1.0.0"