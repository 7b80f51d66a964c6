"""FAQ catalogue served by the demo backend.

Uses the built-in catalogue unless ``FAQS_FILE`` names a JSON file holding
a list of ``{"q": ..., "a": ...}`` objects.
"""

import logging
import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from campus_chat.models.schemas import FAQ

logger = logging.getLogger(__name__)

DEFAULT_FAQS: tuple[FAQ, ...] = (
    FAQ(
        question="What is the application deadline?",
        answer="Deadlines vary by program; generally before June 30 for fall intake.",
    ),
    FAQ(
        question="How do I apply for scholarship?",
        answer=(
            "You can apply through the scholarships page after submitting "
            "your application."
        ),
    ),
    FAQ(
        question="Which courses are offered?",
        answer=(
            "We offer B.Tech, B.Sc, BBA and MBA programs along with "
            "several diploma courses."
        ),
    ),
    FAQ(
        question="What are the tuition fees?",
        answer="Fees depend on the program; the fee structure is published on the admissions page.",
    ),
    FAQ(
        question="Is hostel accommodation available?",
        answer="Yes, separate hostels are available for men and women with mess facilities.",
    ),
    FAQ(
        question="What are the placement statistics?",
        answer="Last year over 85% of eligible students were placed; see the placements page for details.",
    ),
)

_FAQ_LIST = TypeAdapter(list[FAQ])


def load_faq_catalog(path: str | Path | None = None) -> list[FAQ]:
    """Load the FAQ catalogue.

    Args:
        path: JSON file to read. Defaults to the ``FAQS_FILE`` environment
            variable; the built-in catalogue is used when neither is set.

    Returns:
        FAQs in catalogue order.

    Raises:
        ValueError: If the file cannot be read or is not a valid FAQ list.
    """
    path = path or os.getenv("FAQS_FILE")
    if not path:
        return list(DEFAULT_FAQS)

    try:
        faqs = _FAQ_LIST.validate_json(Path(path).read_bytes())
    except (OSError, ValidationError) as e:
        raise ValueError(f"Invalid FAQ catalogue {path}: {e}") from e

    logger.info(f"Loaded {len(faqs)} FAQs from {path}")
    return faqs
