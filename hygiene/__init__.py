"""
Password Hygiene Coach Modules
"""

from .charsets import *
from .randomness import *
from .permutation import *
from .strength import *
from .password_generator import *
from .quiz import *
from .validation import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH, DEFAULT_PASSWORD_LENGTH
