"""Benchmark trial orchestration for jauge.

Expands benchmark descriptors into scenarios, measures each scenario
until its samples converge (or a limit is hit), and hands every
finalized trial to a result sink exactly once.
"""
