"""Knowledge-base filtering. Pure functions over loaded FAQ rows."""


def filter_faqs(faqs: list, category: str | None = None, query: str | None = None) -> list:
    """Filter FAQs by exact category, then by a case-insensitive search.

    The query matches as a substring of either the question or the answer.
    A blank query does not filter.
    """
    filtered = faqs

    if category:
        filtered = [faq for faq in filtered if faq.category == category]

    if query and query.strip():
        needle = query.strip().lower()
        filtered = [
            faq for faq in filtered
            if needle in faq.question.lower() or needle in faq.answer.lower()
        ]

    return filtered


def unique_categories(faqs: list) -> list[str]:
    """Distinct non-empty categories in first-seen order."""
    seen: list[str] = []
    for faq in faqs:
        if faq.category and faq.category not in seen:
            seen.append(faq.category)
    return seen
