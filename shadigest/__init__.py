"""SHA-256, SHA-384 and SHA-512 hex digests in plain Python, with a command line tool."""

__version__ = "0.1.0"
__all__ = ["sha256", "sha512", "cli"]