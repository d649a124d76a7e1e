"""
Graph statistics helpers.
Print and analyze the structure of a collected expression graph.
"""

import numpy as np
from typing import Dict
from collections import Counter

from .collector import GraphSnapshot


def get_graph_stats(snapshot: GraphSnapshot) -> Dict:
    """
    Compute graph statistics without printing.

    Returns:
        dict with node/edge counts, fan-in/fan-out and operation breakdown
    """
    if not snapshot.nodes:
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

    n_nodes = len(snapshot.nodes)
    n_edges = len(snapshot.edges)

    # Fan-in: edges ending at the node; fan-out: edges leaving it
    fan_in = Counter(dst for _, dst in snapshot.edges)
    fan_out = Counter(src for src, _ in snapshot.edges)
    fan_ins = [fan_in[node.id] for node in snapshot.nodes]
    fan_outs = [fan_out[node.id] for node in snapshot.nodes]

    op_counter = Counter(
        node.operation.value for node in snapshot.nodes if node.operation is not None
    )

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': sum(1 for node in snapshot.nodes if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(snapshot: GraphSnapshot, detailed: bool = False) -> Dict:
    """
    Print a summary of the collected graph.

    Args:
        snapshot: result of collect()
        detailed: also print the node list (graphs up to 100 nodes)

    Returns:
        the statistics dict from get_graph_stats()
    """
    if not snapshot.nodes:
        print("Empty expression graph")
        return get_graph_stats(snapshot)

    stats = get_graph_stats(snapshot)

    print("\n" + "="*70)
    print("EXPRESSION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    if stats['operations']:
        print()
        print("Operation breakdown:")
        for op_type, count in Counter(stats['operations']).most_common(10):
            pct = 100.0 * count / stats['nodes']
            print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and stats['nodes'] <= 100:
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for node in snapshot.nodes:
            if node.operation is not None:
                operand_info = ", ".join(f"Node{p.id}" for p in node.operands)
                print(f"Node {node.id:4d}: {node.operation.value:6s} ({node.value:10.6f}) <- [{operand_info}]")
            else:
                print(f"Node {node.id:4d}: {'leaf':6s} ({node.value:10.6f}) [{node.label}]")

    print("="*70 + "\n")

    return stats


def analyze_graph_complexity(snapshot: GraphSnapshot) -> str:
    """
    Analyze graph complexity and return a text report.
    """
    stats = get_graph_stats(snapshot)

    if stats['nodes'] == 0:
        return "Empty expression graph"

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

    if stats['operations']:
        top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
        report.append("  Top operations:")
        for op, count in top_ops:
            pct = 100.0 * count / stats['nodes']
            report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
