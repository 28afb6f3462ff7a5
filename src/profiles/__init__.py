"""Language profile layer.

This module builds ranked n-gram profiles, reads and writes profile
files, and keeps the store of registered language profiles.
"""
