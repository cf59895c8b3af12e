"""Batching – size/interval triggered buffer."""
from clientlog.batching.queue import AsyncBatchQueue, FlushCallback

__all__ = ["AsyncBatchQueue", "FlushCallback"]
