"""Tests for the Customer record."""

import dataclasses

import pytest

from tellersim.core import Customer


class TestCustomer:

    def test_derived_times(self):
        customer = Customer(index=1, arrival_time=480, served_time=487, finish_time=499, server=1)

        assert customer.wait_time == 7
        assert customer.service_time == 12
        assert customer.spent_time == 19

    def test_immediate_zero_length_service(self):
        """Service rounded to zero minutes is a valid record."""
        customer = Customer(index=1, arrival_time=5, served_time=5, finish_time=5, server=0)

        assert customer.wait_time == 0
        assert customer.service_time == 0

    def test_served_before_arrival_rejected(self):
        with pytest.raises(ValueError, match="arrival <= served <= finish"):
            Customer(index=1, arrival_time=10, served_time=9, finish_time=20, server=0)

    def test_finish_before_service_rejected(self):
        with pytest.raises(ValueError):
            Customer(index=1, arrival_time=10, served_time=12, finish_time=11, server=0)

    def test_negative_arrival_rejected(self):
        with pytest.raises(ValueError):
            Customer(index=1, arrival_time=-1, served_time=0, finish_time=1, server=0)

    def test_negative_server_rejected(self):
        with pytest.raises(ValueError, match="server"):
            Customer(index=1, arrival_time=0, served_time=0, finish_time=1, server=-1)

    def test_is_frozen(self):
        customer = Customer(index=1, arrival_time=0, served_time=0, finish_time=1, server=0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            customer.finish_time = 5
