"""
Abstract interfaces for clab
"""
from .parser import ArgParser_i
