"""
Build a single two-input neuron as an expression graph and export it.

    neuron = tanh(x1*w1 + x2*w2 + b)

Prints the DOT description by default, or a graph summary with --summary.
"""

import argparse

from expr_graph import (
    RenderConfig,
    collect,
    new_leaf,
    print_graph_summary,
    tanh,
    to_dot,
)


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Export a neuron expression graph',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--x', type=float, nargs=2, default=[2.0, 0.0],
                        help='Inputs x1 x2')
    parser.add_argument('--w', type=float, nargs=2, default=[-3.0, 1.0],
                        help='Weights w1 w2')
    parser.add_argument('--bias', type=float, default=6.7,
                        help='Bias b')
    parser.add_argument('--summary', action='store_true',
                        help='Print graph statistics instead of DOT')
    parser.add_argument('--output', type=str, default=None,
                        help='Write DOT source to this file')
    parser.add_argument('--show-ops', action='store_true',
                        help='Draw operation nodes')
    parser.add_argument('--show-grad', action='store_true',
                        help='Append the gradient slot to node text')
    parser.add_argument('--verbose', action='store_true')
    return parser.parse_args()


def build_neuron(x, w, bias):
    """Return the neuron output node."""
    x1 = new_leaf(x[0], "x1")
    x2 = new_leaf(x[1], "x2")
    w1 = new_leaf(w[0], "w1")
    w2 = new_leaf(w[1], "w2")
    b = new_leaf(bias, "b")

    xw1 = x1 * w1
    xw2 = x2 * w2

    neuron = (xw1 + xw2) + b
    neuron.relabel("neuron")
    neuron.apply(tanh)
    return neuron


def main():
    args = parse_args()
    neuron = build_neuron(args.x, args.w, args.bias)
    snapshot = collect([neuron])

    if args.summary:
        print_graph_summary(snapshot, detailed=args.verbose)
        return

    config = RenderConfig(
        show_operations=args.show_ops,
        show_grad=args.show_grad,
        verbose=args.verbose,
    )
    source = to_dot(snapshot, config)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(source)
        print(f"DOT written to {args.output}")
    else:
        print(source)


if __name__ == "__main__":
    main()
