"""Evaluation: the trampolined evaluator and the builtin primitives."""
