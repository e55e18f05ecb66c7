from flipfish.evaluation.base import Evaluator
from flipfish.evaluation.heuristic import HeuristicEvaluator, evaluate

__all__ = ["Evaluator", "HeuristicEvaluator", "evaluate"]
