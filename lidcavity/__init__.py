"""Two-dimensional lid-driven cavity flow solver with VTK rectilinear-grid output."""

__version__ = "0.1.0"
__all__ = ["config", "solver", "vtk", "cli"]