"""HR portal core: accounts, departments, employees and requests."""

__version__ = "0.3.0"
