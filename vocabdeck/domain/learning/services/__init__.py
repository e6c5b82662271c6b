"""Domain services for the learning context."""

from .article_splitter import split_french_article
from .card_reconciliation_service import CardReconciliationService, ReconciliationResult
from .eligibility import is_card_eligible
from .eligibility_counting_service import EligibilityCountingService

__all__ = [
    "CardReconciliationService",
    "EligibilityCountingService",
    "ReconciliationResult",
    "is_card_eligible",
    "split_french_article",
]
