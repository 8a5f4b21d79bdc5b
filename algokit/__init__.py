"""Classic algorithms and small puzzle solvers, with a command-line front end."""

__version__ = "0.1.0"