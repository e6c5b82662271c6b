"""
Learning bounded context - Domain layer.

This context handles vocabulary cards and training setup:
- Card consolidation (deduplication and enrichment)
- Question eligibility and counting
- The unit/lesson hierarchy cards are filed under

Aggregates:
- Card: A single vocabulary entry
- Unit: A named group of lessons
"""
