"""Declarative diagnostics for exceptions: codes, help, labelled spans and error chains."""

__version__ = "0.1.0"