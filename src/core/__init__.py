"""
Core domain models, mathematical primitives, and contracts.

Everything here is a pure function or an immutable value object; nothing
holds state between calls.
"""
