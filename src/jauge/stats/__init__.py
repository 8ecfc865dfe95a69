"""Statistics engine for jauge.

Provides table-driven Normal and Chi-Squared distribution functions,
running sample statistics, histograms, and Chi-Squared goodness-of-fit
testing: the pieces the trial scheduler uses to decide when a
benchmark has been measured enough.
"""
