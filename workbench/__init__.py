"""Teaching models: payroll office, directed graph container and pizzeria."""

__version__ = "0.1.0"