"""Refund window evaluator."""
