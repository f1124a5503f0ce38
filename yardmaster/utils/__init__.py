"""
Utilities Package

Formatting helpers for build results.
"""
