"""Common mathematics, angle and time algorithms.

These algorithms are more "general" in that they don't require their own, separate package.
The goal is to make all the algorithms to be as simple to use as possible.
"""
