"""
French article splitting.

Separates "la table" into article "la" and word "table" so cards are stored
and looked up by their bare form.
"""

import re

from vocabdeck.domain.learning.value_objects import SplitWord

# Elided articles bind directly to the next word: l'homme, d'eau
_ELIDED_ARTICLE = re.compile(r"^(l'|d')([a-zàâçéèêëîïôûùüÿñæœ]+)", re.IGNORECASE)

# Definite, indefinite and contracted articles followed by whitespace
_SPACED_ARTICLE = re.compile(r"^(le|la|les|un|une|des|l'|d')\s+", re.IGNORECASE)


def split_french_article(raw_text: str) -> SplitWord:
    """
    Split a leading French article from a word.

    Only the first article is consumed. Input without a recognised article
    is returned trimmed as the word.

    Args:
        raw_text: Free-form input, possibly starting with an article

    Returns:
        SplitWord with the article as typed (or None) and the remaining word
    """
    text = raw_text.strip()

    elided = _ELIDED_ARTICLE.match(text)
    if elided:
        article = elided.group(1)
        return SplitWord(word=text[len(article) :].strip(), article=article)

    spaced = _SPACED_ARTICLE.match(text)
    if spaced:
        return SplitWord(word=text[spaced.end() :].strip(), article=spaced.group(1))

    return SplitWord(word=text)
