"""Syntax layer: tokenizer, AST, failures, and printer."""
