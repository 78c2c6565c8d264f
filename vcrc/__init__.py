"""VCRC — vapor-compression refrigeration cycle analysis.

Solves the state points of single- and two-stage refrigeration cycles
(recuperators, economizers, intercooling, parallel compression, ejectors,
Mitsubishi Zubadan) and decomposes their irreversibility with an
entropy-based (exergy) analysis.
"""

__app_name__ = "vcrc"
__version__ = "0.1.0"
