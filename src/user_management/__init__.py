"""User management: a controller over a pluggable user-storage service."""

__version__ = "0.1.0"
