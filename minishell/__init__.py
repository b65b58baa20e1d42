"""Tokenizer, variable expansion and pipeline command builder for a small shell."""

__version__ = "0.1.0"
__all__ = ["chars", "textutil", "tokens", "expand", "commands", "shell"]