"""Language classification engine.

This module scores input profiles against enabled language profiles
and selects the best-matching labels.
"""
