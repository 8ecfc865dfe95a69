"""jauge: statistically driven benchmark trial orchestration."""

__version__ = "0.1.0"
