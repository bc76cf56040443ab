"""todoedit - keyboard-driven todo list editor"""

__version__ = "0.1.0"
