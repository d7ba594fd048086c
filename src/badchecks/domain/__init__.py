"""Domain layer — value kinds and the primitive checks.

This layer depends only on the stdlib.
It must never import from checks, services, commands, or config.
"""
