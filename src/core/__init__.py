"""
Core building blocks: sequence primitives and exact selection algorithms.

This module contains pure, side-effect free functions that are independent
of any external system (storage, network, I/O).
"""
