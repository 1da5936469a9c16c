"""Domain layer — field values, validators, and format recognizers.

This layer depends only on stdlib.
It must never import from apps, output, commands, or config.
"""
