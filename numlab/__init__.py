"""Root finding for nonlinear equations and Lagrange interpolation."""

__version__ = "0.1.0"
__all__ = ["rootfind", "interpolation"]