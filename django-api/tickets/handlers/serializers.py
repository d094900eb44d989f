"""Serializers for parsing ticket requests and rendering domain results."""

from rest_framework import serializers

from tickets.domain import CalculationResult, TicketCategory, TicketCategoryRequest


class TicketRequestSerializer(serializers.Serializer):
    """Input serializer for one category line of a purchase."""

    category = serializers.ChoiceField(choices=[category.value for category in TicketCategory])
    quantity = serializers.IntegerField(min_value=0)


class QuoteRequestSerializer(serializers.Serializer):
    """Input serializer for POST /api/tickets/quote"""

    tickets = TicketRequestSerializer(many=True, allow_empty=False)

    def to_requests(self) -> list[TicketCategoryRequest]:
        return [
            TicketCategoryRequest(category=item["category"], quantity=item["quantity"])
            for item in self.validated_data["tickets"]
        ]


class PurchaseRequestSerializer(QuoteRequestSerializer):
    """Input serializer for POST /api/purchases"""

    account_id = serializers.IntegerField()


class QuoteSerializer(serializers.Serializer):
    """Serializer for a successful CalculationResult."""

    total_seats = serializers.IntegerField()
    cost = serializers.SerializerMethodField()

    def get_cost(self, result: CalculationResult) -> str:
        return str(result.cost)


class PurchaseSerializer(serializers.Serializer):
    """Serializer for a completed purchase."""

    account_id = serializers.IntegerField()
    total_seats = serializers.IntegerField()
    amount = serializers.IntegerField()
