"""Human-readable match reasons.

Pure text formatting, kept apart from scoring so it can be used and tested
on its own.
"""

from collections.abc import Sequence


def slug_to_label(slug: str) -> str:
    """'problem-solving' -> 'Problem Solving'."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def join_natural(items: Sequence[str]) -> str:
    """Join items as an English list: 'A', 'A and B', 'A, B and C'."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " and " + items[-1]


def build_match_reason(
    matched_interests: Sequence[str],
    matched_skills: Sequence[str],
    industry: str,
) -> str:
    """Build the one-sentence rationale shown with a recommendation.

    Interest and skill clauses appear only when something matched; the
    industry clause is always present.
    """
    clauses = []
    if matched_interests:
        labels = [slug_to_label(tag) for tag in matched_interests]
        clauses.append(f"Matches your interest in {join_natural(labels)}")
    if matched_skills:
        labels = [slug_to_label(tag) for tag in matched_skills]
        clauses.append(f"aligns with your skills in {join_natural(labels)}")
    clauses.append(f"fits well within the {slug_to_label(industry)} industry you prefer")

    sentence = ", ".join(clauses)
    return sentence[:1].upper() + sentence[1:] + "."
