"""
Shared Kernel

Base classes and utilities shared by the lot registry and the booking ledger:
value objects, error kinds, the unit of work and the in-process message bus.
"""
