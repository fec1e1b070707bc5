"""Two- and three-component coordinate vectors with tolerance-based comparison."""

__version__ = "0.0.1"
__all__ = ["errors", "xy", "xyz"]