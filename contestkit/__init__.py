"""Solutions to classic competitive-programming problems, with a small command-line front end."""

__version__ = "0.1.0"

__all__ = ["cli", "graphs", "numbers", "searching", "sequences"]