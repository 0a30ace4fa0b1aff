"""Contains classes and conversion functions for different definitions of time.

The functions and class API are extremely straightforward to retain flexibility. Calendar
dates and Julian days are kept apart by :class:`.CivilDateTime` and :class:`.JulianDate`,
and ΔT estimates live in :mod:`.deltat`.
"""
