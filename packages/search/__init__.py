from .finder import SearchReport, find_valid_words, iter_candidates, search

__all__ = ["SearchReport", "find_valid_words", "iter_candidates", "search"]
