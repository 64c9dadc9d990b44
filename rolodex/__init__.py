# Rolodex: people, notes about them, and search over both.

__version__ = "0.3.0"
