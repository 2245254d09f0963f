# flake8: noqa
"""
The interp module implements the cubic Hermite basis, implemented in Numba.
"""

from ._cubic import get_hermite_coefs, get_lut
