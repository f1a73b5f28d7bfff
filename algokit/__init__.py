"""Algorithm solutions for searching, arithmetic, strings and arrays, plus small containers."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "searching", "strings", "structures"]