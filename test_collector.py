"""
Graph collection: deduplication, edge order, multi-root, cycle robustness.
"""

import warnings

import pytest

from expr_graph import GraphSnapshot, Operation, add, collect, combine, mul, new_leaf, trace


@pytest.fixture
def diamond():
    a = new_leaf(2.0, "A")
    b = new_leaf(3.0, "B")
    c = combine(Operation.ADD, a, b)
    d = combine(Operation.MUL, c, a)
    return a, b, c, d


def _reaches_itself(node):
    stack = list(node.operands)
    seen = set()
    while stack:
        n = stack.pop()
        if n is node:
            return True
        if n.id in seen:
            continue
        seen.add(n.id)
        stack.extend(n.operands)
    return False


def test_diamond_dedup(diamond):
    a, b, c, d = diamond
    nodes, edges = collect([d])

    assert nodes == [d, c, a, b]
    assert edges == [(c.id, d.id), (a.id, c.id), (b.id, c.id), (a.id, d.id)]


def test_edges_only_reference_collected_nodes(diamond):
    *_, d = diamond
    snapshot = collect(d)
    ids = set(snapshot.node_ids())
    assert len(ids) == len(snapshot.nodes)
    for src, dst in snapshot.edges:
        assert src in ids and dst in ids


def test_collect_is_deterministic(diamond):
    *_, d = diamond
    first = collect([d])
    second = collect([d])
    assert first.nodes == second.nodes
    assert first.edges == second.edges


def test_multi_root_deduplicates_shared_operand():
    shared = new_leaf(1.0, "s")
    x = new_leaf(2.0, "x")
    y = new_leaf(3.0, "y")
    r1 = add(shared, x)
    r2 = mul(y, shared)

    nodes, edges = collect([r1, r2])
    assert nodes == [r1, shared, x, r2, y]
    assert edges == [
        (shared.id, r1.id),
        (x.id, r1.id),
        (y.id, r2.id),
        (shared.id, r2.id),
    ]


def test_root_reachable_from_earlier_root_is_not_repeated(diamond):
    a, b, c, d = diamond
    nodes, edges = collect([d, c, a])
    assert nodes == [d, c, a, b]
    assert len(edges) == 4


def test_same_operand_twice_gives_two_edges():
    x = new_leaf(4.0, "x")
    doubled = combine(Operation.ADD, x, x)
    nodes, edges = collect(doubled)
    assert doubled.value == 8.0
    assert doubled.label == "[x+x]"
    assert nodes == [doubled, x]
    assert edges == [(x.id, doubled.id), (x.id, doubled.id)]


def test_single_root_and_trace_agree(diamond):
    *_, d = diamond
    assert trace(d) == collect([d])
    assert isinstance(trace(d), GraphSnapshot)


def test_empty_roots():
    nodes, edges = collect([])
    assert nodes == []
    assert edges == []


def test_collect_rejects_non_nodes():
    with pytest.raises(TypeError):
        collect([1.0])


def test_combined_graphs_are_acyclic(diamond):
    for node in diamond:
        assert not _reaches_itself(node)


def test_deep_chain_does_not_hit_recursion_limit():
    one = new_leaf(1.0, "1")
    x = new_leaf(0.0, "x")
    for _ in range(3000):
        x = add(x, one)
    nodes, edges = collect(x)
    assert x.value == 3000.0
    assert len(nodes) == 3002
    assert len(edges) == 6000


def test_cycle_terminates_with_warning():
    a = new_leaf(1.0, "a")
    b = new_leaf(2.0, "b")
    c = add(a, b)
    # Corrupt the graph: a now depends on c
    a._operands = (c,)

    with pytest.warns(RuntimeWarning, match="Cycle"):
        nodes, edges = collect(c)
    assert len(nodes) == 3


def test_acyclic_collection_does_not_warn(diamond):
    *_, d = diamond
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        collect(d)
