from django.urls import path

from tickets.handlers import PurchaseView, QuoteView

urlpatterns = [
    path("tickets/quote", QuoteView.as_view(), name="ticket-quote"),
    path("purchases", PurchaseView.as_view(), name="purchase-create"),
]
