import argparse
from tabulate import tabulate

from space_filling_curves.paths import CURVES, make_indexer, generate_path
from space_filling_curves.locality import path_stats, time_lookups
from space_filling_curves.utils import MAX_ORDER

def run_curves(order: int, curve_names: list[str], show_path: bool = False, num_runs: int = 1000, seed: int = 0):
    """
    Builds the requested curves at the given order, prints their paths if asked,
    and prints a locality / lookup-time comparison table.
    """
    print("--- Space-Filling Curve Comparison ---")

    # 1. Build the indexers (order is validated here)
    indexers = {name: make_indexer(name, order) for name in curve_names}
    first = next(iter(indexers.values()))
    print(f"\n1. Grid: order {order}, {first.n}x{first.n} = {first.total_cells} cells")

    # 2. Generate the full path for each curve
    print("2. Generating paths...")
    paths = {name: generate_path(indexer) for name, indexer in indexers.items()}

    if show_path:
        headers = ["Index"] + [f"{name.capitalize()} (x, y)" for name in paths]
        rows = []
        for i in range(first.total_cells):
            rows.append([i] + [f"({p[i].x}, {p[i].y})" for p in paths.values()])
        print(tabulate(rows, headers=headers, tablefmt="grid"))

    # 3. Compare locality and lookup speed
    print(f"\n3. Timing {num_runs} random lookups per curve...")
    headers = ["Curve", "Steps", "Mean Step", "Max Step", "Jumps (>1)", "Path Length", "Avg Lookup (µs)"]
    table_data = []
    for name, indexer in indexers.items():
        stats = path_stats(paths[name])
        avg_time = time_lookups(indexer, num_runs=num_runs, seed=seed)
        table_data.append([
            name.capitalize(),
            stats["steps"],
            f"{stats['mean_step']:.3f}",
            stats["max_step"],
            stats["jumps"],
            stats["total_length"],
            f"{avg_time:.2f}",
        ])

    print(tabulate(table_data, headers=headers, tablefmt="grid"))
    print("-" * 80)
    return table_data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare Hilbert and Morton space-filling curves on a 2^order grid.")
    parser.add_argument("--order", type=int, default=3,
                        help=f"Curve order; the grid side is 2^order (1 to {MAX_ORDER}).")
    parser.add_argument("--curve", choices=sorted(CURVES) + ["both"], default="both",
                        help="Which curve to build.")
    parser.add_argument("--show-path", action="store_true",
                        help="Print the index -> coordinate table for every cell.")
    parser.add_argument("--runs", type=int, default=1000,
                        help="Number of random lookups to time per curve.")
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed for the random lookup queries.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not 1 <= args.order <= MAX_ORDER:
        parser.error(f"--order must be between 1 and {MAX_ORDER}")

    curve_names = sorted(CURVES) if args.curve == "both" else [args.curve]
    return run_curves(args.order, curve_names, show_path=args.show_path, num_runs=args.runs, seed=args.seed)


if __name__ == "__main__":
    main()
