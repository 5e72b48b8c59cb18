"""Read and unpack Debian binary packages, with small display-free widget models."""

__version__ = "0.1.0"

__all__ = ["clock", "cpu", "deb", "pages"]