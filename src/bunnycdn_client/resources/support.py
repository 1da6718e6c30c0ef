"""Support ticket helpers."""

from __future__ import annotations

from .. import endpoints
from ..models import Ticket, TicketPage
from ..validation import require_id, require_page, require_page_size
from .base import ResourceBase


class SupportResource(ResourceBase):
    """Read and close support tickets."""

    def list_tickets(self, page: int = 1, page_size: int = 1000) -> TicketPage:
        require_page(page)
        require_page_size(page_size, "page_size")
        return self._call(
            endpoints.LIST_TICKETS,
            params=self._page_params(page, "pageSize", page_size),
        )

    def get_ticket(self, ticket_id: int) -> Ticket:
        """Return a ticket with its comments.

        Raises:
            NotFoundError: The ticket does not exist.
        """
        require_id(ticket_id, "ticket_id")
        return self._call(endpoints.GET_TICKET, path_params={"id": ticket_id})

    def close_ticket(self, ticket_id: int) -> None:
        require_id(ticket_id, "ticket_id")
        self._call(endpoints.CLOSE_TICKET, path_params={"id": ticket_id})
