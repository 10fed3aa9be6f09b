"""
complexpr evaluator package
"""

from .evaluator import Evaluator, evaluate

__all__ = ["Evaluator", "evaluate"]
