"""Ordinal text utilities.

Locale-independent string comparison, predicates, hashing, affix
trimming, padding, escaping and splitting over UTF-16 code units. The
functions live in ordtext.core.
"""

from ordtext.core.comparison import StringComparison
from ordtext.exceptions import InvalidArgumentError

__version__ = "0.1.0"

__all__ = ["InvalidArgumentError", "StringComparison", "__version__"]
