"""Command line entry: solve one problem from standard input or a file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from judgebox import (
    aris,
    code_folding,
    dp,
    dynamic_connectivity,
    geometry,
    graphs,
    greedy,
    numbers,
    searching,
    strings,
    toy_tank,
)

_PROBLEMS: dict[str, Callable[[str], str]] = {
    "construction": graphs.run_construction,
    "subtree": graphs.run_subtree_queries,
    "partition": graphs.run_partition,
    "workbook": graphs.run_workbook,
    "critical-path": graphs.run_critical_path,
    "line-up": graphs.run_line_up,
    "tunnel": graphs.run_tunnel,
    "euler-phi": numbers.run_euler_phi,
    "prime-sum": numbers.run_prime_sum,
    "walking": numbers.run_walking,
    "change": numbers.run_change,
    "ranking": numbers.run_ranking,
    "stair-numbers": numbers.run_stair_numbers,
    "cut-log": searching.run_cut_log,
    "subsequence-sums": searching.run_subsequence_sums,
    "race": searching.run_race,
    "shortest-subarray": searching.run_shortest_subarray,
    "pair-sums": searching.run_pair_sums,
    "raider": dp.run_raider,
    "cheating": dp.run_cheating,
    "palindrome": dp.run_palindrome,
    "tsp": dp.run_tsp,
    "bishops": dp.run_bishops,
    "sudoku": dp.run_sudoku,
    "decorate": strings.run_decorate,
    "erase": strings.run_erase,
    "origami": strings.run_origami,
    "note": strings.run_note,
    "keyboard": strings.run_keyboard,
    "fuel": greedy.run_fuel,
    "balloon": greedy.run_balloon,
    "segments": geometry.run_segments,
    "polygon-area": geometry.run_polygon_area,
    "dynamic-connectivity": dynamic_connectivity.run_dynamic_connectivity,
    "toy-tank": toy_tank.run_toy_tank,
    "aris": aris.run_aris,
    "code-folding": code_folding.run_code_folding,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="judgebox", description="Solve a judge problem.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS), help="problem to solve")
    parser.add_argument("-i", "--input", type=Path, help="read input from this file")
    args = parser.parse_args(argv)
    text = args.input.read_text() if args.input else sys.stdin.read()
    try:
        output = _PROBLEMS[args.problem](text)
    except ValueError as exc:
        print(f"judgebox: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())