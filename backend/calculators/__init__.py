"""
Deterministic treatment calculation engine.

Pure Python math. No database, no I/O.
Given finished measurements, a treatment template and a fabric,
produce the fabric requirement and its cost with a step-by-step breakdown.
"""
