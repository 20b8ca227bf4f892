"""FAQ management service."""

from dataclasses import dataclass

from job_board_client.adapters.http_client import ApiClient
from job_board_client.domain.faq import Faq


@dataclass
class FaqService:
    """CRUD operations for FAQ entries."""

    client: ApiClient

    async def get_all_faqs(self) -> list[Faq]:
        """Return all FAQs."""
        payload = await self.client.get("/Faq", action="fetch FAQs")
        return [Faq.model_validate(item) for item in payload or []]

    async def get_faq(self, faq_id: int) -> Faq | None:
        """Return a single FAQ."""
        payload = await self.client.get(f"/Faq/{faq_id}", action="fetch FAQ")
        return Faq.model_validate(payload) if payload is not None else None

    async def create_faq(self, faq: Faq) -> Faq | None:
        """Create a FAQ and return the stored entry."""
        payload = await self.client.post(
            "/Faq", _without_none(faq.to_payload()), action="create FAQ"
        )
        return Faq.model_validate(payload) if payload is not None else None

    async def update_faq(self, faq_id: int, faq: Faq) -> Faq | None:
        """Update a FAQ. The API may answer without a body."""
        body = _without_none(faq.to_payload())
        body["faqId"] = faq_id
        payload = await self.client.put(f"/Faq/{faq_id}", body, action="update FAQ")
        return Faq.model_validate(payload) if payload is not None else None

    async def delete_faq(self, faq_id: int) -> None:
        """Delete a FAQ."""
        await self.client.delete(f"/Faq/{faq_id}", action="delete FAQ")


def _without_none(payload: dict[str, object]) -> dict[str, object]:
    return {key: value for key, value in payload.items() if value is not None}
