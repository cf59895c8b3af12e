"""Kernel types – Result."""
from clientlog.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
