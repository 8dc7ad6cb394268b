"""Expression classification."""

from .expression_detector import ExpressionClassifier

__all__ = ["ExpressionClassifier"]
