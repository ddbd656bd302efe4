"""Fast Marching building blocks: grid cells, heaps, a solver base class, gradient descent, grid writers and benchmarking."""

__version__ = "0.1.0"