"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain.errors import (
    ConstructionError,
    DomainError,
    ErrorCode,
    PurchaseRejectedError,
)
from tickets.handlers.serializers import (
    PurchaseRequestSerializer,
    PurchaseSerializer,
    QuoteRequestSerializer,
    QuoteSerializer,
)
from tickets.services.calculation_service import TicketCalculationService
from tickets.services.factory import build_purchase_service

logger = logging.getLogger(__name__)

INVALID_TICKET_REQUEST = {
    "code": ErrorCode.INVALID_TICKET_REQUEST.value,
    "message": "Invalid ticket request",
}


def _error_response(error: DomainError, status_code: int) -> Response:
    return Response({"code": error.code.value, "message": error.message}, status=status_code)


class QuoteView(APIView):
    """Handler for POST /api/tickets/quote"""

    def post(self, request: Request) -> Response:
        serializer = QuoteRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(INVALID_TICKET_REQUEST, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = TicketCalculationService().compute(serializer.to_requests())
        except ConstructionError as exc:
            return _error_response(exc, status.HTTP_400_BAD_REQUEST)

        if not result.is_success:
            return Response(
                {"errors": list(result.errors)},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        return Response(QuoteSerializer(result).data)


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(INVALID_TICKET_REQUEST, status=status.HTTP_400_BAD_REQUEST)

        account_id = serializer.validated_data["account_id"]
        try:
            result = build_purchase_service().purchase_tickets(
                account_id, serializer.to_requests()
            )
        except (ConstructionError, PurchaseRejectedError) as exc:
            return _error_response(exc, status.HTTP_400_BAD_REQUEST)
        except Exception:
            # The service only lets collaborator failures through.
            logger.warning("Purchase collaborator unavailable", extra={"account_id": account_id})
            return Response(
                {"code": "COLLABORATOR_UNAVAILABLE", "message": "Ticket purchase is unavailable"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        purchase = {
            "account_id": account_id,
            "total_seats": result.total_seats,
            "amount": result.cost.to_whole_units(),
        }
        return Response(PurchaseSerializer(purchase).data, status=status.HTTP_201_CREATED)
