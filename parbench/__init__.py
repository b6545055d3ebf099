"""Sequential and threaded k-means benchmarks, image kernels and CPU convolution."""

__version__ = "0.1.0"