"""Builds services from the gateways named in Django settings."""

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.services.calculation_service import TicketCalculationService
from tickets.services.purchase_service import TicketPurchaseService


def build_purchase_service() -> TicketPurchaseService:
    payment_gateway = import_string(settings.TICKETS_PAYMENT_GATEWAY)()
    seat_reservation_gateway = import_string(settings.TICKETS_SEAT_RESERVATION_GATEWAY)()
    return TicketPurchaseService(
        payment_gateway=payment_gateway,
        seat_reservation_gateway=seat_reservation_gateway,
        calculation_service=TicketCalculationService(),
    )
