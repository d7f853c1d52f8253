"""
Computation graph utilities.

Print and analyze the structure of the graph reachable from an output Value.
Nodes are numbered in reverse-topological order (the output is Node 0).
"""

import numpy as np
from typing import Dict, List
from collections import Counter

from .engine import topological_order
from .value import Value


def _index(nodes: List[Value]) -> Dict[int, int]:
    return {id(node): i for i, node in enumerate(nodes)}


def get_graph_stats(output: Value) -> Dict:
    """
    Collect graph statistics (no printing).

    Returns:
        dict with node/edge/leaf counts, fan-in and fan-out figures and
        a per-operation count keyed by op label
    """
    nodes = topological_order(output)
    n_nodes = len(nodes)
    idx = _index(nodes)

    # fan-in: number of operands of each node
    fan_ins = [len(node.parents) for node in nodes]
    n_edges = sum(fan_ins)

    # fan-out: how many edges consume each node (x + x counts twice)
    fan_outs = [0] * n_nodes
    for node in nodes:
        for parent in node.parents:
            fan_outs[idx[id(parent)]] += 1

    op_counter = Counter(str(node.op) for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': sum(1 for node in nodes if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter),
    }


def print_graph_summary(output: Value, detailed: bool = False) -> Dict:
    """
    Print a summary of the computation graph.

    Args:
        output: Value whose ancestry is summarized
        detailed: also list every node (only for graphs up to 100 nodes)

    Returns:
        the statistics dict from get_graph_stats()
    """
    stats = get_graph_stats(output)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        nodes = topological_order(output)
        idx = _index(nodes)
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for i, node in enumerate(nodes):
            parent_info = ", ".join(f"Node{idx[id(p)]}" for p in node.parents)
            print(f"Node {i:3d}: {str(node.op):12s} <- [{parent_info}]")

    print("="*70 + "\n")

    return stats


def print_computation_graph(output: Value, max_nodes: int = 20) -> None:
    """
    Print the graph structure, one line per node.

    Args:
        output: Value whose ancestry is printed
        max_nodes: print at most this many nodes
    """
    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    nodes = topological_order(output)
    idx = _index(nodes)

    for i, node in enumerate(nodes[:max_nodes]):
        head = f"Node {i:4d}: {str(node.op):12s} ({node.data:10.6f}, grad={node.grad:10.6f})"
        if node.parents:
            parent_info = ", ".join(f"Node{idx[id(p)]}" for p in node.parents)
            print(f"{head} <- [{parent_info}]")
        else:
            print(f"{head} [leaf/input]")

    if len(nodes) > max_nodes:
        print(f"... ({len(nodes) - max_nodes} more nodes)")

    print("="*70 + "\n")


def analyze_graph_complexity(output: Value) -> str:
    """
    Return a short text report on the size and shape of the graph.
    """
    stats = get_graph_stats(output)

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total nodes: {stats['nodes']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"
    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
