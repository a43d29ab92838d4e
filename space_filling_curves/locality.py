# --- Locality Measures (Provided for Curve Comparison) ---

import random
import time

import numpy as np


def step_distances(path) -> np.ndarray:
    """
    Manhattan distance between each pair of consecutive points of a path.
    Returns len(path) - 1 values (empty for paths shorter than two points).
    """
    points = np.asarray(path, dtype=np.int64).reshape(-1, 2)
    if len(points) < 2:
        return np.zeros(0, dtype=np.int64)
    return np.abs(np.diff(points, axis=0)).sum(axis=1)


def path_stats(path) -> dict:
    """
    Summarizes how far a path moves between consecutive cells.
    A jump is any step longer than one grid cell.
    """
    d = step_distances(path)
    if len(d) == 0:
        return {"steps": 0, "mean_step": 0.0, "max_step": 0, "jumps": 0, "total_length": 0}
    return {
        "steps": int(len(d)),
        "mean_step": float(d.mean()),
        "max_step": int(d.max()),
        "jumps": int(np.sum(d > 1)),
        "total_length": int(d.sum()),
    }


def time_lookups(indexer, num_runs: int = 1000, seed: int = 0) -> float:
    """
    Average time in microseconds of a single index_to_point call,
    over num_runs random indices.
    """
    if num_runs <= 0:
        return 0.0
    rng = random.Random(seed)
    queries = [rng.randrange(indexer.total_cells) for _ in range(num_runs)]
    start_time = time.perf_counter()
    for q in queries:
        indexer.index_to_point(q)
    end_time = time.perf_counter()
    return (end_time - start_time) * 1e6 / num_runs
