"""Classic data structures (arrays, token collections, matrices, linked lists,
stacks, queues, maps) with string, token, number, binary-record and bit-level
file helpers."""

__version__ = "1.0.0"