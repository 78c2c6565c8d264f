"""Core building blocks for VCRC.

This package contains the pieces every cycle relies on:
- errors: exception hierarchy
- fluids: CoolProp-based refrigerant property oracle
- solvers: bracketed Newton-Raphson root finding
- config: solver settings and run configuration loading
"""
