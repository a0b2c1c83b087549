"""Tests for ProductService validation and error tagging."""

from __future__ import annotations

import logging

import pytest

from product_catalog_api.app.core.errors import ErrorKind, ProductError
from product_catalog_api.app.services.product_service import parse_expiration
from tests.factories import make_product


class TestValidation:

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"name": ""}, "name"),
            ({"quantity": 0}, "quantity"),
            ({"code_value": ""}, "code_value"),
            ({"expiration": ""}, "expiration"),
            ({"price": 0}, "price"),
        ],
    )
    def test_required_fields(self, service, overrides, field):
        with pytest.raises(ProductError) as exc_info:
            service.save(make_product(**overrides))
        assert exc_info.value.kind is ErrorKind.FIELD_REQUIRED
        assert exc_info.value.field == field
        assert str(exc_info.value) == f"field is required: {field}"

    def test_only_first_failure_is_reported(self, service):
        with pytest.raises(ProductError) as exc_info:
            service.save(make_product(name="", quantity=0, price=0))
        assert exc_info.value.field == "name"

    def test_required_checked_before_format(self, service):
        with pytest.raises(ProductError) as exc_info:
            service.save(make_product(expiration="bad", price=0))
        assert exc_info.value.kind is ErrorKind.FIELD_REQUIRED
        assert exc_info.value.field == "price"

    def test_invalid_expiration(self, service):
        with pytest.raises(ProductError) as exc_info:
            service.save(make_product(expiration="99/99/9999"))
        assert exc_info.value.kind is ErrorKind.FIELD_FORMAT
        assert str(exc_info.value) == "field has an invalid format: expiration"

    def test_negative_values_are_accepted(self, service):
        product = make_product(quantity=-1, price=-2.5)
        service.save(product)
        assert product.id == 1

    def test_failed_validation_stores_nothing(self, service, repository):
        with pytest.raises(ProductError):
            service.save(make_product(name=""))
        assert repository.count() == 0
        assert repository.last_id == 0


class TestParseExpiration:

    @pytest.mark.parametrize("value", ["01/01/2030", "29/02/2024", "31/12/1999"])
    def test_valid_dates(self, value):
        parse_expiration(value)

    @pytest.mark.parametrize(
        "value",
        ["31/02/2025", "29/02/2023", "99/99/9999", "1/1/2030", "01-01-2030", "2030/01/01", "01/13/2030", " 01/01/2030"],
    )
    def test_invalid_dates(self, value):
        with pytest.raises(ValueError):
            parse_expiration(value)

    def test_day_comes_first(self):
        parsed = parse_expiration("13/05/2030")
        assert (parsed.day, parsed.month, parsed.year) == (13, 5, 2030)


class TestSave:

    def test_assigns_id(self, service):
        product = make_product()
        service.save(product)
        assert product.id == 1
        assert service.get_by_id(1) == product

    def test_duplicate_code_is_tagged(self, service):
        service.save(make_product(code_value="DUP"))
        with pytest.raises(ProductError) as exc_info:
            service.save(make_product(code_value="DUP"))
        assert exc_info.value.kind is ErrorKind.CODE_ALREADY_EXISTS
        assert str(exc_info.value) == "product code already exists: code_value"

    def test_logs_creation(self, service, caplog):
        caplog.set_level(logging.INFO, logger="product_catalog_api")
        service.save(make_product(code_value="LOGGED"))
        assert "Created product 1 (LOGGED)" in caplog.text


class TestGetById:

    def test_missing_id_reported_as_bad_id(self, service):
        with pytest.raises(ProductError) as exc_info:
            service.get_by_id(999)
        assert exc_info.value.kind is ErrorKind.PRODUCT_ID
        assert exc_info.value.field == "id"


class TestUpdate:

    def test_preserves_id(self, service):
        service.save(make_product(code_value="A"))
        service.save(make_product(code_value="B"))
        service.update(make_product(id=2, name="Renamed", code_value="B"))
        stored = service.get_by_id(2)
        assert stored.id == 2
        assert stored.name == "Renamed"

    def test_validates_like_save(self, service):
        service.save(make_product())
        with pytest.raises(ProductError) as exc_info:
            service.update(make_product(id=1, quantity=0))
        assert exc_info.value.kind is ErrorKind.FIELD_REQUIRED
        assert service.get_by_id(1).quantity == 10

    def test_missing_id_is_tagged(self, service):
        with pytest.raises(ProductError) as exc_info:
            service.update(make_product(id=3))
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.field == "id"

    def test_code_conflict(self, service):
        service.save(make_product(code_value="X"))
        service.save(make_product(code_value="Y"))
        with pytest.raises(ProductError) as exc_info:
            service.update(make_product(id=2, code_value="X"))
        assert exc_info.value.kind is ErrorKind.CODE_ALREADY_EXISTS


class TestDelete:

    def test_deletes(self, service):
        service.save(make_product())
        service.delete(1)
        with pytest.raises(ProductError):
            service.get_by_id(1)

    def test_missing_id_is_tagged(self, service):
        with pytest.raises(ProductError) as exc_info:
            service.delete(1)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert str(exc_info.value) == "product not found: id"
