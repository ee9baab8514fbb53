"""Square matrices with arithmetic operators, transpose, powers and determinants."""

__version__ = "0.1.0"
__all__ = ["squaremat"]