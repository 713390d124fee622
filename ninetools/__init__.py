"""Bitcoin rate lookup, an RPN calculator and Ford-Johnson merge-insertion sort."""

__version__ = "0.1.0"

__all__ = ["bitcoin", "console", "pmerge", "pmerge_cli", "rpn"]