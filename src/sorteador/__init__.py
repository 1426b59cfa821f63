"""Random two-team draws that respect per-position quotas."""

__version__ = "1.0.0"
