"""
Generators — produce file content from validated, normalized input.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile``.  Generators are pure: they never touch the disk.
"""
