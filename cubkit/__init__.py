"""Building blocks: status codes, bit helpers, rings, allocators, transactional data, an executor and pattern helpers."""

__version__ = "0.1.0"