"""Domain layer: the sequence container, its errors, transformers, and algebra.

This layer depends only on stdlib.
It must never import from services, plugins, commands, output, or config.
"""
