"""Kernel-style primitives: index queues, ring buffers, intrusive lists, channels, locks, messages and build helpers."""

__version__ = "0.1.0"