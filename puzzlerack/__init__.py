"""Solvers for classic programming-contest puzzles, most with paired approaches and a command each."""

__version__ = "0.1.0"