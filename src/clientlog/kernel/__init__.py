"""Kernel – errors, clocks and result types shared by every layer."""
