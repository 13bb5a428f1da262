from bmsearch.search.algorithms.boyermoore import BoyerMoore
from bmsearch.search.algorithms.simple import NaiveSearch

ALGORITHMS = {
    "boyermoore": BoyerMoore,
    "naive": NaiveSearch,
}

__all__ = ["ALGORITHMS", "BoyerMoore", "NaiveSearch"]
