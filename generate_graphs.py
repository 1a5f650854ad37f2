import sys

import matplotlib.pyplot as plt

from config import ALGORITHMS, DEFAULT_FRAME_COUNTS
from simulator import run, validate_frame_count
from trace_loader import load_trace

METRICS = ['page_faults', 'replacements', 'disk_writes']
TITLES = ['Page Faults', 'Replacements', 'Disk Writes']


def run_comparison(stream, frame_counts=DEFAULT_FRAME_COUNTS, algorithms=ALGORITHMS):
    """results[frame_count][algorithm] -> Statistics.as_dict()"""
    results = {}
    for frame_count in frame_counts:
        results[frame_count] = {}
        for algorithm in algorithms:
            stats = run(stream, frame_count, algorithm)
            results[frame_count][algorithm] = stats.as_dict()
    return results


def print_summary(results):
    print(f"{'Frames':<8} {'Algorithm':<10} {'Page Faults':<15} {'Replacements':<15} {'Disk Writes':<15}")
    print("-" * 65)
    for frame_count, by_algorithm in results.items():
        for algorithm, r in by_algorithm.items():
            print(f"{frame_count:<8} {algorithm:<10} {r['page_faults']:<15} "
                  f"{r['replacements']:<15} {r['disk_writes']:<15}")


def plot_comparison(results, output='algorithm_comparison.png', show=False):
    frame_counts = list(results)
    algorithms = list(results[frame_counts[0]]) if frame_counts else []

    fig, axes = plt.subplots(1, len(METRICS), figsize=(15, 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    legend_handles = []
    width = 0.8 / max(1, len(algorithms))
    x = range(len(frame_counts))

    for idx, (metric, title) in enumerate(zip(METRICS, TITLES)):
        ax = axes[idx]
        for a, algorithm in enumerate(algorithms):
            values = [results[fc][algorithm][metric] for fc in frame_counts]
            offset = (a - (len(algorithms) - 1) / 2) * width
            bars = ax.bar([i + offset for i in x], values, width, label=algorithm)

            if idx == 0:
                legend_handles.append(bars[0])

            for bar in bars:
                height = bar.get_height()
                ax.text(bar.get_x() + bar.get_width() / 2., height,
                        f'{int(height)}', ha='center', va='bottom', fontsize=7)

        ax.set_title(title)
        ax.set_xlabel('Frames')
        ax.set_xticks(list(x))
        ax.set_xticklabels([str(fc) for fc in frame_counts])
        ax.grid(axis='y', alpha=0.3)

    if legend_handles:
        fig.legend(legend_handles, algorithms, loc='lower center',
                   ncol=len(algorithms), frameon=True)

    plt.tight_layout()
    plt.subplots_adjust(bottom=0.18)
    plt.savefig(output, dpi=300, bbox_inches='tight')
    if show:
        plt.show()
    plt.close(fig)
    return output


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python generate_graphs.py <trace_file> [frame_count ...]")
        return 1

    try:
        frame_counts = [validate_frame_count(int(n)) for n in argv[1:]] or DEFAULT_FRAME_COUNTS
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    stream = load_trace(argv[0])

    print("Running simulations...")
    results = run_comparison(stream, frame_counts)
    print_summary(results)

    output = plot_comparison(results)
    print(f"\nGraph saved as '{output}'")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
