class ResidentSetOverflowError(RuntimeError):
    """Raised when the resident set grows past the frame budget."""


class PhysicalMemory:
    def __init__(self, num_frames):
        self.num_frames = num_frames
        # page -> None, kept in admission (or recency) order
        self.frames = {}
        self.dirty = set()

    def __contains__(self, page):
        return page in self.frames

    def __len__(self):
        return len(self.frames)

    def __iter__(self):
        return iter(self.frames)

    def is_full(self):
        return len(self.frames) >= self.num_frames

    def oldest(self):
        return next(iter(self.frames))

    def touch(self, page):
        # Move to the most recent end
        self.frames[page] = self.frames.pop(page)

    def mark_dirty(self, page):
        self.dirty.add(page)

    def is_dirty(self, page):
        return page in self.dirty

    def admit(self, page, is_write=False):
        self.frames[page] = None
        if is_write:
            self.dirty.add(page)

        if len(self.frames) > self.num_frames:
            raise ResidentSetOverflowError(
                f"{len(self.frames)} pages resident with only {self.num_frames} frames"
            )

    def evict(self, page):
        """Remove a page, returning True if it had to be written back."""
        del self.frames[page]
        was_dirty = self.is_dirty(page)
        self.dirty.discard(page)
        return was_dirty


class Statistics:
    def __init__(self):
        self.page_faults = 0
        self.replacements = 0
        self.disk_writes = 0
        self.total_accesses = 0

    @property
    def hits(self):
        return self.total_accesses - self.page_faults

    def record_access(self):
        self.total_accesses += 1

    def record_page_fault(self):
        self.page_faults += 1

    def record_replacement(self, is_dirty_replacement=False):
        self.replacements += 1
        if is_dirty_replacement:
            self.disk_writes += 1

    def as_dict(self):
        return {
            'page_faults': self.page_faults,
            'replacements': self.replacements,
            'disk_writes': self.disk_writes,
            'total_accesses': self.total_accesses,
        }

    def __eq__(self, other):
        if not isinstance(other, Statistics):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return f"Statistics({self.as_dict()})"
