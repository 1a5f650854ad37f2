"""
Synthetic trace generation.

Draws a pool of random 32-bit addresses and then samples it with a normal
distribution centred on the middle of the pool, so a handful of addresses
dominate the trace the way a hot working set would.
"""

import random


def generate_trace(output_file, size, limit, seed=None, std_dev=2.0, write_ratio=0.1):
    """
    Write `limit` references drawn from `size` distinct addresses.

    Returns the list of (address, kind) pairs that were written.
    """
    if size < 1:
        raise ValueError(f"Address pool size must be at least 1, got {size}")
    if limit < 0:
        raise ValueError(f"Trace length must not be negative, got {limit}")

    rng = random.Random(seed)
    registers = [rng.getrandbits(32) for _ in range(size)]
    mean = size // 2

    references = []
    for _ in range(limit):
        while True:
            index = int(rng.gauss(mean, std_dev))
            if 0 <= index < size:
                break
        kind = 'W' if rng.random() < write_ratio else 'R'
        references.append((f"{registers[index]:08x}", kind))

    with open(output_file, 'w', encoding='utf-8') as f:
        for address, kind in references:
            f.write(f"{address} {kind}\n")

    return references


def sort_trace(input_file):
    """Raw (address, kind) pairs from a trace, sorted by address then kind."""
    references = []
    with open(input_file, 'r', encoding='utf-8') as f:
        for line in f:
            parts = line.split()
            if len(parts) == 2:
                references.append((parts[0], parts[1][0]))
    return sorted(references)


def print_sorted_trace(references):
    if not references:
        print("No references loaded.")
        return
    print("Register | Type")
    for address, kind in references:
        print(f"{address} {kind}")
