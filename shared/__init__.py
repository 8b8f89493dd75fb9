"""
Shared Kernel

Base classes and utilities shared by the listing and booking contexts:
domain building blocks, errors, value objects, the unit of work and the
message bus.
"""
