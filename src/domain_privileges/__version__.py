"""Version information for domain-privileges."""

__version__ = "0.1.0"
