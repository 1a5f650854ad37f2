from bisect import bisect_right
import sys
import time

from config import ALGORITHMS, DISK_ACCESS_TIME, MEMORY_ACCESS_TIME, PROGRESS_STEPS
from memory_manager import PhysicalMemory, Statistics
from report import build_report
from trace_loader import load_trace


class ConfigurationError(ValueError):
    """Bad frame count or strategy name, detected before simulating."""


class ReplacementPolicy:
    """
    One simulation run. Each instance owns its resident set, dirty set and
    counters, so two runs never share state.
    """

    name = 'BASE'

    def __init__(self, frame_count):
        self.frame_count = validate_frame_count(frame_count)
        self.reset()

    def reset(self):
        self.memory = PhysicalMemory(self.frame_count)
        self.stats = Statistics()

    def prepare(self, stream):
        return

    def run(self, stream, progress=None):
        """Replay the whole stream, calling progress(done, total) PROGRESS_STEPS times."""
        self.reset()
        self.prepare(stream)

        total = len(stream)
        step = max(1, total // PROGRESS_STEPS)
        for i, ref in enumerate(stream):
            self.handle_reference(i, ref)
            if progress is not None and (i + 1) % step == 0:
                progress(i + 1, total)
        if progress is not None and total % step:
            progress(total, total)

        return self.stats

    def select_victim(self, index):
        raise NotImplementedError

    def on_hit(self, page):
        return

    def handle_reference(self, index, ref):
        self.stats.record_access()

        if ref.page in self.memory:
            self.on_hit(ref.page)
            if ref.is_write:
                self.memory.mark_dirty(ref.page)
            return

        self.stats.record_page_fault()

        if self.memory.is_full():
            victim = self.select_victim(index)
            is_dirty = self.memory.evict(victim)
            self.stats.record_replacement(is_dirty_replacement=is_dirty)

        self.memory.admit(ref.page, is_write=ref.is_write)


class IncrementalPolicy(ReplacementPolicy):
    """Policies that only look at history and can be fed one reference at a time."""

    def access(self, ref):
        self.handle_reference(self.stats.total_accesses, ref)
        return self.stats


class FIFOPolicy(IncrementalPolicy):
    name = 'FIFO'

    def select_victim(self, index):
        return self.memory.oldest()


class LRUPolicy(IncrementalPolicy):
    name = 'LRU'

    def on_hit(self, page):
        self.memory.touch(page)

    def select_victim(self, index):
        return self.memory.oldest()


class OptimalPolicy(ReplacementPolicy):
    """
    Belady's algorithm: evict the page whose next use lies farthest ahead.

    Needs the whole stream up front, so it only runs in batch.
    """

    name = 'OPT'

    def __init__(self, frame_count):
        super().__init__(frame_count)
        self.occurrences = {}

    def index_stream(self, stream):
        """Map each page to the sorted list of positions where it is referenced."""
        occurrences = {}
        for i, ref in enumerate(stream):
            occurrences.setdefault(ref.page, []).append(i)
        return occurrences

    def next_use(self, page, index):
        """Position of the first reference to page after index, or None."""
        positions = self.occurrences.get(page, [])
        pos = bisect_right(positions, index)
        if pos == len(positions):
            return None
        return positions[pos]

    def select_victim(self, index):
        farthest = -1
        victim = None

        for page in self.memory:
            next_use = self.next_use(page, index)
            if next_use is None:
                # Never used again
                return page
            if next_use > farthest:
                farthest = next_use
                victim = page

        return victim

    def prepare(self, stream):
        self.occurrences = self.index_stream(stream)


POLICIES = {
    'FIFO': FIFOPolicy,
    'LRU': LRUPolicy,
    'OPT': OptimalPolicy,
}


def parse_strategy(name):
    key = str(name).upper()
    if key not in POLICIES:
        raise ConfigurationError(
            f"Invalid strategy: {name} (expected one of {', '.join(ALGORITHMS)})"
        )
    return key


def validate_frame_count(frame_count):
    if isinstance(frame_count, bool) or not isinstance(frame_count, int):
        raise ConfigurationError(f"Frame count must be an integer, got {frame_count!r}")
    if frame_count < 1:
        raise ConfigurationError(f"Frame count must be at least 1, got {frame_count}")
    return frame_count


def create_policy(policy, frame_count):
    return POLICIES[parse_strategy(policy)](frame_count)


def run(stream, frame_count, policy, progress=None):
    """Replay stream against frame_count frames and return fresh Statistics."""
    return create_policy(policy, frame_count).run(stream, progress=progress)


def print_progress(done, total):
    percentage = done / total * 100 if total else 100.0
    print(f"Processing: {percentage:.1f}% ({done}/{total} references)", file=sys.stderr)


class PageReplacementSimulator:

    def __init__(self, algorithm='FIFO', frame_count=4,
                 memory_access_time=MEMORY_ACCESS_TIME,
                 disk_access_time=DISK_ACCESS_TIME,
                 progress=None):
        # Fail before any trace is read
        self.algorithm = parse_strategy(algorithm)
        self.frame_count = validate_frame_count(frame_count)
        self.memory_access_time = memory_access_time
        self.disk_access_time = disk_access_time
        self.progress = progress

    def simulate(self, stream):
        start = time.perf_counter()
        stats = run(stream, self.frame_count, self.algorithm, progress=self.progress)
        elapsed = time.perf_counter() - start

        return build_report(
            stats,
            algorithm=self.algorithm,
            frame_count=self.frame_count,
            elapsed=elapsed,
            memory_access_time=self.memory_access_time,
            disk_access_time=self.disk_access_time,
        )

    def run_simulation(self, filename):
        stream = load_trace(filename)
        return self.simulate(stream)
