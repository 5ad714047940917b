"""64-bit fixed-point reciprocals for replacing division with multiplication."""

__version__ = "1.0.0"
__all__ = ["reciprocal"]