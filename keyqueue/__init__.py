"""
keyqueue - FIFO queue per key over HTTP

Clients PUT values under a key and GET the oldest one back, optionally
waiting a few seconds for a value to arrive.

Architecture:
- Each module is self-contained with clear interfaces
- The queue backend is replaceable behind QueueRepository
- The HTTP layer only orchestrates

Modules:
- queue: Keyed FIFO storage and bounded-wait pop
- config: Environment configuration
- api: HTTP response models
"""

__version__ = "1.0.0"
