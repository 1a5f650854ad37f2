import argparse
import sys

from config import ALGORITHMS, DEFAULT_FRAME_COUNTS, DISK_ACCESS_TIME, MEMORY_ACCESS_TIME
from simulator import (
    ConfigurationError,
    PageReplacementSimulator,
    parse_strategy,
    print_progress,
    validate_frame_count,
)


def strategy_arg(value):
    try:
        return parse_strategy(value)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e))


def frame_count_arg(value):
    try:
        return validate_frame_count(int(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def count_arg(minimum):
    def parse(value):
        try:
            count = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
        if count < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {count}")
        return count
    return parse


def ratio_arg(value):
    try:
        ratio = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ratio: {value!r}")
    if not 0.0 <= ratio <= 1.0:
        raise argparse.ArgumentTypeError(f"ratio must be between 0 and 1, got {ratio}")
    return ratio


def build_parser():
    parser = argparse.ArgumentParser(
        description="Page replacement simulator (FIFO, LRU, OPT)")
    subparsers = parser.add_subparsers(dest='command', required=True)

    run_parser = subparsers.add_parser('run', help="simulate one strategy on a trace")
    run_parser.add_argument('trace_file', help="trace file, one '<hex-address> <R|W>' per line")
    run_parser.add_argument('frame_count', type=frame_count_arg, help="number of physical frames")
    run_parser.add_argument('strategy', type=strategy_arg,
                            help=f"replacement strategy ({', '.join(ALGORITHMS)})")
    run_parser.add_argument('--memory-time', type=float, default=MEMORY_ACCESS_TIME,
                            help="memory access time in ns")
    run_parser.add_argument('--disk-time', type=float, default=DISK_ACCESS_TIME,
                            help="disk access time in ns")
    run_parser.add_argument('-q', '--quiet', action='store_true', help="no progress output")

    gen_parser = subparsers.add_parser('generate', help="write a synthetic trace")
    gen_parser.add_argument('output_file')
    gen_parser.add_argument('size', type=count_arg(1), help="number of distinct addresses")
    gen_parser.add_argument('limit', type=count_arg(0), help="number of references to write")
    gen_parser.add_argument('--seed', type=int, default=None)
    gen_parser.add_argument('--write-ratio', type=ratio_arg, default=0.1)
    gen_parser.add_argument('--sorted', action='store_true', help="print the sorted trace afterwards")

    cmp_parser = subparsers.add_parser('compare', help="compare all strategies and plot the results")
    cmp_parser.add_argument('trace_file')
    cmp_parser.add_argument('--frames', type=frame_count_arg, nargs='+', default=DEFAULT_FRAME_COUNTS)
    cmp_parser.add_argument('--output', default='algorithm_comparison.png')

    return parser


def cmd_run(args):
    simulator = PageReplacementSimulator(
        algorithm=args.strategy,
        frame_count=args.frame_count,
        memory_access_time=args.memory_time,
        disk_access_time=args.disk_time,
        progress=None if args.quiet else print_progress,
    )
    print(simulator.run_simulation(args.trace_file))
    return 0


def cmd_generate(args):
    from trace_generator import generate_trace, print_sorted_trace, sort_trace

    generate_trace(args.output_file, args.size, args.limit,
                   seed=args.seed, write_ratio=args.write_ratio)
    print(f"New Trace File: {args.output_file}")
    if args.sorted:
        print_sorted_trace(sort_trace(args.output_file))
    return 0


def cmd_compare(args):
    from generate_graphs import plot_comparison, print_summary, run_comparison
    from trace_loader import load_trace

    results = run_comparison(load_trace(args.trace_file), args.frames)
    print_summary(results)
    output = plot_comparison(results, args.output)
    print(f"\nGraph saved as '{output}'")
    return 0


COMMANDS = {
    'run': cmd_run,
    'generate': cmd_generate,
    'compare': cmd_compare,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return COMMANDS[args.command](args)
    except ConfigurationError as e:
        parser.error(str(e))


if __name__ == '__main__':
    sys.exit(main())
