"""Refrigeration cycle topologies for VCRC.

Provides the component specifications, one class per cycle topology and a
dispatcher (``vcrc.cycle.solver``) that builds a cycle from a run
configuration.
"""
