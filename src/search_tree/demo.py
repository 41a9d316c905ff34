"""
Binary Search Tree Demo -- Build, traverse, unbalance and rebalance a tree.

Builds a tree from random deduplicated integers, prints its four traversal
orders, pushes it out of balance by appending values past the maximum, then
rebalances it. Each stage is drawn with matplotlib.

Generates (under the output directory, ``./search_tree_demo`` by default):
- viz/*.png -- Individual visualization files
- report.pdf -- Combined PDF report

Run with ``python -m search_tree.demo``.
"""

from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from .binary_search_tree import BinarySearchTree
from .tree_printer import print_tree

SEED = 42
SAMPLE_SIZE = 100
MAX_VALUE = 100
EXTRA_VALUES = (101, 102, 103)
DEFAULT_OUTPUT_DIR = Path("search_tree_demo")

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


def random_sorted_values(seed=SEED, size=SAMPLE_SIZE, max_value=MAX_VALUE):
    """Return sorted, deduplicated integers drawn from [1, max_value]."""
    np.random.seed(seed)
    draws = np.random.randint(1, max_value + 1, size=size)
    return np.unique(draws).tolist()


def collect(traversal):
    values = []
    traversal(lambda node: values.append(node.value))
    return values


def node_positions(tree):
    """Map each node to (in-order index, -depth) for plotting."""
    positions = {}
    for index, node in enumerate(_nodes_in_order(tree)):
        positions[node] = (index, -tree.depth(node))
    return positions


def _nodes_in_order(tree):
    nodes = []
    tree.in_order(nodes.append)
    return nodes


def draw_tree(tree, title, path, highlight=()):
    positions = node_positions(tree)
    fig, ax = plt.subplots(figsize=(16, 7))

    for node, (x, y) in positions.items():
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = positions[child]
                ax.plot([x, cx], [y, cy], color=COLORS["dark"], linewidth=0.8, alpha=0.6, zorder=1)

    highlight = set(highlight)
    for node, (x, y) in positions.items():
        color = COLORS["red"] if node.value in highlight else COLORS["blue"]
        ax.scatter(x, y, s=180, color=color, edgecolors="white", zorder=2)
        ax.text(x, y, str(node.value), fontsize=6, ha="center", va="center",
                color="white", fontweight="bold", zorder=3)

    status = "balanced" if tree.is_balanced() else "NOT balanced"
    ax.set_title(f"{title}\n{len(positions)} nodes, height {tree.height()}, {status}",
                 fontsize=11, fontweight="bold")
    ax.set_xlabel("In-order position")
    ax.set_ylabel("Depth")
    depths = [y for _, y in positions.values()] or [0]
    ax.set_yticks(range(min(depths), 1))
    ax.set_yticklabels([str(-d) for d in range(min(depths), 1)])
    ax.grid(True, alpha=0.2)

    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path


def draw_heights(stages, path):
    names = [name for name, _, _ in stages]
    heights = [height for _, height, _ in stages]
    optimal = [int(np.floor(np.log2(size))) if size else -1 for _, _, size in stages]

    fig, ax = plt.subplots(figsize=(8, 5))
    x = np.arange(len(names))
    ax.bar(x - 0.2, heights, width=0.4, color=COLORS["orange"], label="Actual height")
    ax.bar(x + 0.2, optimal, width=0.4, color=COLORS["green"], label="floor(log2 n)")
    ax.set_xticks(x)
    ax.set_xticklabels(names)
    ax.set_ylabel("Height (edges)")
    ax.set_title("Tree height per stage", fontsize=11, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3, axis="y")

    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path


def generate_pdf_report(summary_lines, viz_files, report_path):
    with PdfPages(report_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.9, "Binary Search Tree Demo", fontsize=20, ha="center", fontweight="bold")
        fig.text(0.08, 0.8, "\n".join(summary_lines), fontsize=11, ha="left", va="top",
                 family="monospace", linespacing=1.4)
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            fig.suptitle(viz_file.stem.replace("_", " ").title(), fontsize=14, fontweight="bold")
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.9])
            ax.imshow(plt.imread(str(viz_file)))
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)
    return report_path


def main(output_dir=None):
    output_dir = Path(output_dir) if output_dir is not None else DEFAULT_OUTPUT_DIR
    viz_dir = output_dir / "viz"
    viz_dir.mkdir(parents=True, exist_ok=True)

    print("Binary Search Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")

    values = random_sorted_values()
    tree = BinarySearchTree(values)
    print(f"Built tree from {len(values)} unique values in [1, {MAX_VALUE}]")
    print_tree(tree.root)

    balanced_after_build = tree.is_balanced()
    print(f"\nTree is balanced: {balanced_after_build}")

    print("\n" + "=" * 60)
    print("Traversals")
    print("=" * 60)
    for name, traversal in (
        ("Level order", tree.level_order),
        ("Pre-order", tree.pre_order),
        ("In-order", tree.in_order),
        ("Post-order", tree.post_order),
    ):
        print(f"{name}:")
        print(" ".join(str(v) for v in collect(traversal)))

    stages = [("built", tree.height(), len(tree))]
    viz_files = [draw_tree(tree, "Built from sorted values", viz_dir / "01_built_tree.png")]

    print("\n" + "=" * 60)
    print("Unbalancing")
    print("=" * 60)
    for value in EXTRA_VALUES:
        tree.insert(value)
    print(f"Inserted {', '.join(str(v) for v in EXTRA_VALUES)}")
    balanced_after_inserts = tree.is_balanced()
    print(f"Tree is balanced: {balanced_after_inserts}")
    stages.append(("after inserts", tree.height(), len(tree)))
    viz_files.append(draw_tree(tree, "After appending past the maximum",
                               viz_dir / "02_unbalanced_tree.png", highlight=EXTRA_VALUES))

    print("\n" + "=" * 60)
    print("Rebalancing")
    print("=" * 60)
    tree.rebalance()
    print("Rebalanced tree.")
    balanced_after_rebalance = tree.is_balanced()
    print(f"Tree is balanced: {balanced_after_rebalance}")
    print_tree(tree.root)
    stages.append(("rebalanced", tree.height(), len(tree)))
    viz_files.append(draw_tree(tree, "After rebalance", viz_dir / "03_rebalanced_tree.png",
                               highlight=EXTRA_VALUES))
    viz_files.append(draw_heights(stages, viz_dir / "04_height_per_stage.png"))

    summary_lines = [f"Seed: {SEED}", f"Unique values: {len(values)}", ""]
    summary_lines += [f"{name:<15} height={height:<3} nodes={size}" for name, height, size in stages]
    summary_lines += [
        "",
        f"Balanced after build:     {balanced_after_build}",
        f"Balanced after inserts:   {balanced_after_inserts}",
        f"Balanced after rebalance: {balanced_after_rebalance}",
    ]
    report_path = generate_pdf_report(summary_lines, viz_files, output_dir / "report.pdf")

    print("\n" + "=" * 60)
    print("All stages completed successfully.")
    print(f"Visualizations: {viz_dir}/")
    print(f"Report: {report_path}")
    print("=" * 60)

    return {
        "values": values,
        "balanced_after_build": balanced_after_build,
        "balanced_after_inserts": balanced_after_inserts,
        "balanced_after_rebalance": balanced_after_rebalance,
        "viz_files": viz_files,
        "report": report_path,
    }


if __name__ == "__main__":
    main()
