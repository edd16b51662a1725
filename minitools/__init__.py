"""Command-line tools: a bitcoin wallet evaluator, an RPN calculator and a merge-insertion sorter."""

__version__ = "0.1.0"
__all__ = ["exchange", "rpn", "pmerge"]