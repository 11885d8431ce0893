"""
Experiments for byonn.

Standalone measurements that exercise the core, such as the matmul
benchmark.
"""

from .benchmark import run_benchmark, BenchmarkResult

__all__ = ["run_benchmark", "BenchmarkResult"]
