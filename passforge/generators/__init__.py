"""
Passforge Generators
=====================

Secure integer sampling, alphabet construction, and password generation.
"""

from passforge.generators.secure_random import SecureRandom, uniform_int
from passforge.generators.charset import build_charset, class_charset
from passforge.generators.password import PasswordGenerator

__all__ = [
    "SecureRandom",
    "uniform_int",
    "build_charset",
    "class_charset",
    "PasswordGenerator",
]
