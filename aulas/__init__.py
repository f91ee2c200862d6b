"""CS Aulas - introductory computer science course exercises."""

__version__ = "0.1.0"
