"""
Core domain models, partition algorithms, and contracts.

This module contains the quintile building blocks that are independent
of the callers that rank and interpret the population.
"""
