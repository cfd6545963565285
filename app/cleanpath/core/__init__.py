"""Core infrastructure for cleanpath.

Path resolution, the settings file, and console theming.
"""
