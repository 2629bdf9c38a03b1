"""
Root conftest.py - lets the test suite import ``artwheel`` from a source checkout.

Not needed once the package is installed with ``pip install -e .``.
"""
import os
import sys

REPO_ROOT = os.path.dirname(os.path.abspath(__file__))

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
