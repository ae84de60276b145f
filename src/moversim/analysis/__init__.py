"""
Analysis layer: derived quantities for reporting and plots.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- census: counts, speeds, shape diversity and limb-angle spread
"""

from moversim.analysis.census import CensusResult, census, limb_angle_table

__all__ = [
    "CensusResult",
    "census",
    "limb_angle_table",
]
