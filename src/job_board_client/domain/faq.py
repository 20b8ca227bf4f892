"""Domain models for FAQs."""

from typing import Any

from job_board_client.domain.models import ApiModel


class Faq(ApiModel):
    """Frequently asked question entry."""

    faq_id: Any = None
    question: Any = None
    answer: Any = None
    category: Any = None
    display_order: Any = None
    is_published: Any = None
