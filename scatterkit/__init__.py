"""Scattering-order parameter parsing, gnuplot script helpers and style options."""

__version__ = "0.1.0"