"""crateguard — validating boundary layer for a package-registry publish API."""

__version__ = "0.1.0"
