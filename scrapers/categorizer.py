"""
Keyword heuristic that guesses a clothing category from an item title
"""
from typing import Dict, Sequence

from models import DEFAULT_CATEGORY

# Checked in insertion order; the first category with a matching keyword wins
BASE_KEYWORDS: Dict[str, Sequence[str]] = {
    'top': ('shirt', 'tee', 'hoodie', 'jacket'),
    'bottom': ('jean', 'pant', 'short'),
    'shoes': ('shoe', 'sneaker', 'boot'),
}


def infer_category(title: str, keyword_sets: Dict[str, Sequence[str]] = None,
                   default: str = DEFAULT_CATEGORY) -> str:
    """Case-insensitive substring match of the title against each keyword set"""
    if not title:
        return default

    title_lower = title.lower()
    for category, keywords in (keyword_sets or BASE_KEYWORDS).items():
        if any(keyword in title_lower for keyword in keywords):
            return category

    return default
