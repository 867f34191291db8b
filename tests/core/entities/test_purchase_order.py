"""Unit tests for the purchase order entity and its transition table."""

import pytest
from pydantic import ValidationError

from buildops.core.entities.purchase_order import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    PurchaseOrder,
    PurchaseOrderStatus,
    is_transition_allowed,
)

S = PurchaseOrderStatus


def make_order(**overrides) -> PurchaseOrder:
    data = {
        "item_id": "item-1",
        "item_name": "Cement bags",
        "quantity": 100,
        "unit_cost": 5.0,
        "supplier_id": "sup-1",
        "project_id": "proj-1",
    }
    data.update(overrides)
    return PurchaseOrder(**data)


class TestTransitionTable:
    @pytest.mark.parametrize(
        ("current", "requested"),
        [
            (S.PENDING, "Approved"),
            (S.PENDING, "Rejected"),
            (S.APPROVED, "Ordered"),
        ],
    )
    def test_allowed_pairs(self, current: PurchaseOrderStatus, requested: str):
        assert is_transition_allowed(current, requested)

    def test_every_other_pair_is_rejected(self):
        allowed = {(S.PENDING, S.APPROVED), (S.PENDING, S.REJECTED), (S.APPROVED, S.ORDERED)}
        for current in S:
            for target in S:
                expected = (current, target) in allowed
                assert is_transition_allowed(current, target.value) is expected

    def test_received_is_never_a_transition_target(self):
        assert not any(is_transition_allowed(s, "Received") for s in S)

    def test_unknown_status_string_rejected(self):
        assert not is_transition_allowed(S.PENDING, "Shipped")
        assert not is_transition_allowed(S.PENDING, "approved")

    def test_terminal_states_have_no_exits(self):
        assert TERMINAL_STATUSES == {S.REJECTED, S.RECEIVED}
        for status in TERMINAL_STATUSES:
            assert status not in ALLOWED_TRANSITIONS


class TestPurchaseOrder:
    def test_total_cost_computed(self):
        order = make_order(quantity=100, unit_cost=5.0)
        assert order.total_cost == 500.0

    def test_total_cost_ignores_supplied_value(self):
        order = make_order(quantity=2, unit_cost=3.5, total_cost=999.0)
        assert order.total_cost == 7.0

    def test_defaults_to_pending(self):
        order = make_order()
        assert order.status is S.PENDING
        assert not order.is_terminal

    def test_reprice_keeps_total_consistent(self):
        order = make_order()
        order.reprice(10, 2.25)
        assert (order.quantity, order.unit_cost, order.total_cost) == (10, 2.25, 22.5)

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            make_order(quantity=0)

    def test_negative_unit_cost_rejected(self):
        with pytest.raises(ValidationError):
            make_order(unit_cost=-1)

    def test_item_link_is_optional(self):
        order = make_order(item_id=None)
        assert order.item_id is None

    def test_terminal_flag(self):
        assert make_order(status=S.RECEIVED).is_terminal
        assert make_order(status=S.REJECTED).is_terminal
        assert not make_order(status=S.ORDERED).is_terminal
