"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock, create_autospec

import pytest
from rest_framework.test import APIClient

from tickets.domain import TicketCategory, TicketCategoryRequest
from tickets.gateways import PaymentGateway, SeatReservationGateway


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def collaborators() -> Mock:
    """Gateway doubles attached to one parent so call order is recorded."""
    parent = Mock()
    parent.attach_mock(create_autospec(SeatReservationGateway, instance=True), "seats")
    parent.attach_mock(create_autospec(PaymentGateway, instance=True), "payments")
    return parent


@pytest.fixture
def make_tickets():
    """Build one TicketCategoryRequest per non-zero category."""

    def factory(adults: int = 0, children: int = 0, infants: int = 0) -> list[TicketCategoryRequest]:
        counts = {
            TicketCategory.ADULT: adults,
            TicketCategory.CHILD: children,
            TicketCategory.INFANT: infants,
        }
        return [
            TicketCategoryRequest(category=category, quantity=quantity)
            for category, quantity in counts.items()
            if quantity
        ]

    return factory
