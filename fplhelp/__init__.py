"""Flight-plan coordinates from addresses, with a small Tk desktop helper."""

__version__ = "0.4.0"
__all__ = ["__version__"]