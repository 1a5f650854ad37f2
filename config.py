# Simulation constants

PAGE_SIZE = 4096                 # bytes per page
PAGE_ID_WIDTH = 8                # hex digits in a page identifier

MEMORY_ACCESS_TIME = 100         # ns per memory access
DISK_ACCESS_TIME = 10_000_000    # ns per disk I/O (10 ms)

PROGRESS_STEPS = 10              # progress callbacks per run

ALGORITHMS = ['FIFO', 'LRU', 'OPT']
DEFAULT_FRAME_COUNTS = [2, 4, 8, 16, 32]
