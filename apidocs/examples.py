"""Canned example endpoint used to demonstrate the output formats."""

from .infer import infer_record
from .model import DocumentationRecord

ORDER_REQUEST = {
    "customerId": "CUST001",
    "items": [
        {"productId": "PROD001", "quantity": 2, "price": 39900},
    ],
    "shippingAddress": {
        "street": "123 Main St",
        "city": "Bangkok",
        "postalCode": "10110",
        "country": "Thailand",
    },
    "paymentMethod": "CREDIT_CARD",
}

ORDER_RESPONSE = {
    "id": "ORD001",
    "orderNumber": "POS2024020001",
    "status": "PENDING",
    "customerId": "CUST001",
    "total": 79800,
    "items": [
        {"productId": "PROD001", "quantity": 2, "price": 39900, "subtotal": 79800},
    ],
    "shippingAddress": {
        "street": "123 Main St",
        "city": "Bangkok",
        "postalCode": "10110",
        "country": "Thailand",
    },
    "paymentMethod": "CREDIT_CARD",
    "paymentStatus": "PENDING",
    "createdAt": "2024-02-04T15:30:00Z",
    "estimatedDeliveryTime": "2024-02-04T16:15:00Z",
}

ORDER_NOTES = (
    "- Orders created after 6 PM will be processed the next business day\n"
    "- Payment must be completed within 30 minutes\n"
    "- Free shipping for orders over 50,000 THB"
)


def example_record() -> DocumentationRecord:
    """Return the ``POST /api/v1/orders`` example."""
    return infer_record(
        method="POST",
        path="/api/v1/orders",
        description="Create a new order in the system",
        request=ORDER_REQUEST,
        response=ORDER_RESPONSE,
        notes=ORDER_NOTES,
        response_description="Created order",
    )
