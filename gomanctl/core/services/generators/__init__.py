"""
Generators — render Go source files for a goman application.

Each generator module exposes a ``render_*()`` function that returns a
``GeneratedFile`` and an ``emit()`` function that writes it to disk.
"""
