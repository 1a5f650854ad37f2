from config import DISK_ACCESS_TIME, MEMORY_ACCESS_TIME


class Report:
    """Derived metrics for one finished run."""

    def __init__(self, algorithm, frame_count, total_accesses, page_faults,
                 replacements, disk_writes, elapsed=0.0,
                 memory_access_time=MEMORY_ACCESS_TIME,
                 disk_access_time=DISK_ACCESS_TIME):
        self.algorithm = algorithm
        self.frame_count = frame_count
        self.total_accesses = total_accesses
        self.page_faults = page_faults
        self.replacements = replacements
        self.disk_writes = disk_writes
        self.elapsed = elapsed
        self.memory_access_time = memory_access_time
        self.disk_access_time = disk_access_time

    @property
    def hits(self):
        return self.total_accesses - self.page_faults

    @property
    def miss_rate(self):
        if self.total_accesses == 0:
            return 0.0
        return self.page_faults / self.total_accesses

    @property
    def hit_rate(self):
        if self.total_accesses == 0:
            return 0.0
        return 1.0 - self.miss_rate

    @property
    def effective_access_time(self):
        # EAT = hit_rate * mem + miss_rate * (mem + disk) = mem + miss_rate * disk
        if self.total_accesses == 0:
            return 0.0
        return self.memory_access_time + self.miss_rate * self.disk_access_time

    def __str__(self):
        lines = [
            "========== MEMORY MANAGEMENT STATISTICS ==========",
            f"Algorithm: {self.algorithm}",
            f"Frame Count: {self.frame_count}",
            f"Total Memory Accesses: {self.total_accesses}",
            f"Page Faults: {self.page_faults}",
            f"Replacements: {self.replacements}",
            f"Disk Writes: {self.disk_writes}",
        ]
        if self.total_accesses > 0:
            lines += [
                f"Hit Rate: {self.hit_rate * 100:.2f}% ({self.hits} hits)",
                f"Miss Rate: {self.miss_rate * 100:.2f}% ({self.page_faults} misses)",
                f"Effective Access Time: {self.effective_access_time:.2f} ns",
                f"Running Time: {self.elapsed * 1000:.0f} ms",
            ]
        lines.append("=" * 50)
        return "\n".join(lines)


def build_report(stats, algorithm, frame_count, elapsed=0.0,
                 memory_access_time=MEMORY_ACCESS_TIME,
                 disk_access_time=DISK_ACCESS_TIME):
    return Report(
        algorithm=algorithm,
        frame_count=frame_count,
        total_accesses=stats.total_accesses,
        page_faults=stats.page_faults,
        replacements=stats.replacements,
        disk_writes=stats.disk_writes,
        elapsed=elapsed,
        memory_access_time=memory_access_time,
        disk_access_time=disk_access_time,
    )
