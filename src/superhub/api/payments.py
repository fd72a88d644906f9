"""Payment endpoints."""

from superhub.models.payment import Payment, PaymentCreationForm
from superhub.transport.request import HTTPMethod, invoke_endpoint, list_of


class PaymentsAPI:
    def get_payments(self) -> list[Payment] | None:
        """All payments in the system."""
        return invoke_endpoint(self, HTTPMethod.GET, "/payments", list_of(Payment.from_dict))

    def get_user_payments(self, user_id: int) -> list[Payment] | None:
        return invoke_endpoint(self, HTTPMethod.GET, f"/users/{user_id}/payments", list_of(Payment.from_dict))

    def create_payment(self, user_id: int, form: PaymentCreationForm) -> Payment | None:
        return invoke_endpoint(self, HTTPMethod.POST, f"/users/{user_id}/payments", Payment.from_dict, body=form)
