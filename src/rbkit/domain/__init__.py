"""Domain layer — regex conversion and hash combinators.

This layer depends only on stdlib.
It must never import from config.
"""
