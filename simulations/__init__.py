# simulations/__init__.py
"""
Monte Carlo simulations comparing the sampling engines in hh_sampling.

Run comparisons via:
    python -m simulations.compare --method-a python --method-b numpy --repetitions 100
"""
