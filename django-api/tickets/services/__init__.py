from tickets.services.calculation_service import TicketCalculationService
from tickets.services.purchase_service import TicketPurchaseService

__all__ = ["TicketCalculationService", "TicketPurchaseService"]
