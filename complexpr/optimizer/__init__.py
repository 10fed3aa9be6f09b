"""
complexpr optimizer package

Post-parse passes over expression trees.
"""

from .constant_folding import ConstantFolder, fold_constants

__all__ = ["ConstantFolder", "fold_constants"]
