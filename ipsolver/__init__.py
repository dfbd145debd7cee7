"""Step-by-step affine-scaling interior-point solver for linear programs, with a text renderer and command line."""

__version__ = "0.1.0"