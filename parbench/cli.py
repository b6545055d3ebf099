"""Timing harness comparing sequential and threaded k-means."""

from __future__ import annotations

import argparse
import math
import os
import time
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Optional, Union

from parbench.dataset import generate_dataset_csv
from parbench.parallel import ParallelKMeans
from parbench.sequential import SequentialKMeans

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_SAMPLE_SIZES = (100, 1_000, 10_000, 100_000, 1_000_000, 10_000_000)
DEFAULT_CLUSTER_COUNTS = (3, 5, 10, 15, 20, 25, 30, 40, 50)
DEFAULT_RUNS = 30
THREAD_CAP = 12
DIMENSIONS = 3

SUMMARY_HEADER = "n_samples,k,threads,seq_time,tp_time,speedup\n"


def _parse_row(line: str) -> list[float]:
    """Read comma-separated numbers, stopping at the first field that is not one."""
    values = []
    for field in line.split(","):
        try:
            values.append(float(field))
        except ValueError:
            break
    return values


def load_csv(path: PathLike) -> list[list[float]]:
    """Load a CSV of numbers, skipping its header line."""
    with open(path, encoding="ascii") as source:
        next(source, None)
        return [_parse_row(line.rstrip("\r\n")) for line in source]


def save_matrix_csv(path: PathLike, rows: Iterable[Sequence[float]]) -> None:
    """Write rows of numbers with ten decimal places, one row per line."""
    with open(path, "w", encoding="ascii", newline="") as out:
        for row in rows:
            out.write(",".join(f"{value:.10f}" for value in row) + "\n")


def save_labels_csv(path: PathLike, labels: Iterable[int]) -> None:
    """Write one label per line."""
    with open(path, "w", encoding="ascii", newline="") as out:
        for label in labels:
            out.write(f"{label}\n")


def _timed_mean(model, data: list[list[float]], runs: int) -> float:
    total = 0.0
    for _ in range(runs):
        start = time.perf_counter()
        model.fit(data)
        total += time.perf_counter() - start
    return total / runs


def _default_threads() -> int:
    return min(os.cpu_count() or 1, THREAD_CAP)


def run_benchmark(
    root: PathLike = ".",
    n_list: Sequence[int] = DEFAULT_SAMPLE_SIZES,
    k_list: Sequence[int] = DEFAULT_CLUSTER_COUNTS,
    runs: int = DEFAULT_RUNS,
    max_threads: Optional[int] = None,
) -> Path:
    """Time both k-means variants over every configuration and return the summary path.

    Data sets are generated under ``root/data`` when missing; the summary goes to
    ``root/results/summary.csv`` and the clusterings of the last runs to
    ``root/results/plots``.
    """
    if runs < 1:
        raise ValueError(f"number of runs must be at least 1, got {runs}")
    if max_threads is None:
        max_threads = _default_threads()
    base = Path(root)
    data_dir = base / "data"
    results_dir = base / "results"
    plots_dir = results_dir / "plots"
    for directory in (data_dir, results_dir, plots_dir):
        directory.mkdir(parents=True, exist_ok=True)

    summary_path = results_dir / "summary.csv"
    with open(summary_path, "w", encoding="ascii", newline="") as summary:
        summary.write(SUMMARY_HEADER)
        for n_samples in n_list:
            datafile = data_dir / f"{n_samples}_{DIMENSIONS}.csv"
            if not datafile.exists():
                print(f"Generating {datafile.relative_to(base).as_posix()}...")
                generate_dataset_csv(n_samples, DIMENSIONS, datafile)
            data = load_csv(datafile)

            for k in k_list:
                seq = SequentialKMeans(k)
                seq_mean = _timed_mean(seq, data, runs)
                tag = f"n{n_samples}_k{k}"
                save_matrix_csv(plots_dir / f"centroids_seq_{tag}.csv", seq.centroids)
                save_labels_csv(plots_dir / f"assignments_seq_{tag}.csv", seq.assignments)

                for threads in range(1, max_threads + 1):
                    par = ParallelKMeans(k, n_threads=threads)
                    par_mean = _timed_mean(par, data, runs)
                    speedup = seq_mean / par_mean if par_mean > 0 else math.inf
                    save_matrix_csv(
                        plots_dir / f"centroids_par_{tag}_t{threads}.csv", par.centroids
                    )
                    save_labels_csv(
                        plots_dir / f"assignments_par_{tag}_t{threads}.csv",
                        par.assignments,
                    )
                    summary.write(
                        f"{n_samples},{k},{threads},{seq_mean:.6f},"
                        f"{par_mean:.6f},{speedup:.6f}\n"
                    )
                    summary.flush()

                print(f"Done: n={n_samples}, k={k} (seq={seq_mean:g}s)")

    print("All results written to results/summary.csv")
    print("Clustering outputs for plotting saved in results/plots/")
    return summary_path


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the k-means benchmark from the command line."""
    parser = argparse.ArgumentParser(
        description="Benchmark sequential against threaded k-means."
    )
    parser.add_argument("--root", default=".", help="directory for data and results")
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS, help="repeats per configuration")
    parser.add_argument(
        "--max-threads",
        type=int,
        default=None,
        help=f"highest thread count to try (default: CPU count, at most {THREAD_CAP})",
    )
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=list(DEFAULT_SAMPLE_SIZES),
        help="sample counts to test",
    )
    parser.add_argument(
        "--clusters", type=int, nargs="+", default=list(DEFAULT_CLUSTER_COUNTS),
        help="cluster counts to test",
    )
    args = parser.parse_args(argv)
    try:
        run_benchmark(args.root, args.sizes, args.clusters, args.runs, args.max_threads)
    except (OSError, ValueError) as error:
        parser.exit(1, f"error: {error}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())