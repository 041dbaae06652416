"""Staff and department records kept in an SQLite database, with a command line."""

__version__ = "0.1.0"