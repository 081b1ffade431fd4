"""Frequency-ranked theme terms for the word cloud"""

import math
import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .schema import ReportItem

MAX_THEMES = 75
MIN_TOKEN_LENGTH = 4

STOP_WORDS = frozenset([
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and",
    "any", "are", "as", "at", "be", "because", "been", "before", "being", "below",
    "between", "both", "but", "by", "can", "did", "do", "does", "doing", "don",
    "down", "during", "each", "few", "for", "from", "further", "had", "has", "have",
    "having", "he", "her", "here", "hers", "herself", "him", "himself", "his", "how",
    "i", "if", "in", "into", "is", "it", "its", "itself", "just", "me", "more",
    "most", "my", "myself", "no", "nor", "not", "now", "of", "off", "on", "once",
    "only", "or", "other", "our", "ours", "ourselves", "out", "over", "own", "s",
    "same", "she", "should", "so", "some", "such", "t", "than", "that", "the",
    "their", "theirs", "them", "themselves", "then", "there", "these", "they",
    "this", "those", "through", "to", "too", "under", "until", "up", "very", "was",
    "we", "were", "what", "when", "where", "which", "while", "who", "whom", "why",
    "will", "with", "you", "your", "yours", "yourself", "yourselves",
    # Words every space-biology abstract uses
    "cell", "cells", "effect", "effects", "study", "studies", "found", "showed",
    "analysis", "data", "results", "using", "response", "changes",
])

# Digits and punctuation go too, so "rr-1" becomes "rr" and "gene-expression" one token
_NON_LETTERS = re.compile(r"[^a-z\s]")


@dataclass
class ThemeTerm:
    text: str
    weight: float
    frequency: int


def term_weight(frequency: int) -> float:
    return 10 + math.sqrt(frequency) * 6


def tokenize(text: str) -> List[str]:
    """Lowercase, strip non-letters and drop short tokens and stop words"""
    cleaned = _NON_LETTERS.sub("", text.lower())
    return [
        token for token in cleaned.split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]


def rank_terms(tokens: Iterable[str], limit: int = MAX_THEMES) -> List[ThemeTerm]:
    counts = Counter(tokens)
    terms = [
        ThemeTerm(text=token, weight=term_weight(frequency), frequency=frequency)
        for token, frequency in counts.items()
    ]
    terms.sort(key=lambda term: term.weight, reverse=True)
    return terms[:limit]


def extract_themes(items: Sequence[ReportItem], limit: int = MAX_THEMES) -> List[ThemeTerm]:
    """Top ``limit`` terms across every title and finding, heaviest first"""
    blob = " ".join(f"{item.title} {item.main_findings}" for item in items)
    return rank_terms(tokenize(blob), limit)
