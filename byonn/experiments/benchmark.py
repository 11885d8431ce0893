import time
from typing import List, NamedTuple, Sequence

from ..nn.tensor import Tensor
from ..utils.backend import xp
from ..utils.logger import bench_logger


class BenchmarkResult(NamedTuple):
    size: int
    naive_seconds: float
    optimized_seconds: float

    @property
    def speedup(self):
        if self.optimized_seconds == 0:
            return float("inf")
        return self.naive_seconds / self.optimized_seconds


def run_benchmark(sizes: Sequence[int] = (2, 4, 8, 16, 32, 64)) -> List[BenchmarkResult]:
    """Time ``matmul_naive`` against ``matmul`` on square matrices.

    Raises ``AssertionError`` if the two ever disagree.
    """
    results = []
    for s in sizes:
        a = Tensor(xp.full(s * s, 1.0, dtype=xp.float32), (s, s))
        b = Tensor(xp.full(s * s, 2.0, dtype=xp.float32), (s, s))

        start = time.perf_counter()
        res_naive = a.matmul_naive(b)
        naive_seconds = time.perf_counter() - start

        start = time.perf_counter()
        res_opt = a.matmul(b)
        optimized_seconds = time.perf_counter() - start

        assert res_naive == res_opt, f"matmul and matmul_naive disagree for {s}x{s}"

        result = BenchmarkResult(s, naive_seconds, optimized_seconds)
        bench_logger.info(
            f"{s}x{s}: naive {naive_seconds:.6f}s, optimized {optimized_seconds:.6f}s, "
            f"speedup {result.speedup:.2f}x"
        )
        results.append(result)
    return results


if __name__ == "__main__":
    import matplotlib.pyplot as plt

    results = run_benchmark()

    plt.plot([r.size for r in results], [r.speedup for r in results], marker="o")
    plt.title("matmul speedup over matmul_naive")
    plt.xlabel("Matrix size (n x n)")
    plt.ylabel("Speedup")
    plt.xscale("log", base=2)
    plt.grid(True)
    plt.show()
