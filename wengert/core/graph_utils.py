"""
Tape inspection helpers.
Used to print and analyse the structure of a recorded Wengert list.
"""

from collections import Counter
from typing import Dict

import numpy as np


def get_tape_stats(tape) -> Dict:
    """
    Collect tape statistics without printing.

    Returns:
        dict with node/edge/leaf counts, fan-in and fan-out figures and a
        per-op breakdown
    """
    n_nodes = len(tape.nodes)
    if n_nodes == 0:
        return {
            'nodes': 0,
            'edges': 0,
            'leaves': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    fan_ins = [sum(1 for _ in node.edges()) for node in tape.nodes]

    fan_outs = np.zeros(n_nodes, dtype=int)
    for node in tape.nodes:
        for parent, _ in node.edges():
            fan_outs[parent] += 1

    op_counter = Counter(node.op for node in tape.nodes)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'leaves': sum(1 for node in tape.nodes if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': int(fan_outs.max()),
        'avg_fan_out': float(fan_outs.mean()),
        'operations': dict(op_counter)
    }


def format_tape(tape, max_nodes: int = 20) -> str:
    """
    Render the tape one node per line:

        Node    0: var          [leaf/input]
        Node    2: mul          <- [0 (4.2), 1 (0.5)]
    """
    lines = []
    for i, node in enumerate(tape.nodes[:max_nodes]):
        if node.is_leaf:
            lines.append(f"Node {i:4d}: {node.op:12s} [leaf/input]")
            continue
        parent_info = ", ".join(f"{p} ({float(w):.6g})" for p, w in node.edges())
        lines.append(f"Node {i:4d}: {node.op:12s} <- [{parent_info}]")
    if len(tape.nodes) > max_nodes:
        lines.append(f"... ({len(tape.nodes) - max_nodes} more nodes)")
    return "\n".join(lines)


def print_tape_summary(tape, detailed: bool = False) -> Dict:
    """
    Print a tape summary.

    Args:
        tape: the Tape to inspect
        detailed: also print the node list (only for tapes of at most 100 nodes)

    Returns:
        the statistics dictionary from get_tape_stats
    """
    stats = get_tape_stats(tape)
    if stats['nodes'] == 0:
        print("Empty tape")
        return stats

    print("\n" + "="*70)
    print("TAPE SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / stats['nodes']
        print(f"  {op:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and stats['nodes'] <= 100:
        print()
        print("="*70)
        print("NODE LIST")
        print("="*70)
        print(format_tape(tape, max_nodes=100))

    print("="*70 + "\n")
    return stats
