# tests/database/test_store_errors.py
import logging

import pytest
from sqlalchemy.exc import DataError, IntegrityError, OperationalError, NoResultFound

from flowershop.database.core.errors import store_errors
from flowershop.domain.errors import BackendUnavailable, InvalidInput


class _Diag:
    constraint_name = "uq_tag_name"


class _Orig(Exception):
    diag = _Diag()


def test_passes_through_on_success():
    with store_errors("noop"):
        value = 1
    assert value == 1


def test_integrity_error_becomes_invalid_input():
    with pytest.raises(InvalidInput) as ei:
        with store_errors("create tag"):
            raise IntegrityError("INSERT ...", {}, _Orig())
    assert "uq_tag_name" in ei.value.message
    assert isinstance(ei.value.__cause__, IntegrityError)


def test_data_error_becomes_invalid_input():
    with pytest.raises(InvalidInput):
        with store_errors("update flower"):
            raise DataError("UPDATE ...", {}, Exception("numeric overflow"))


def test_connection_failure_becomes_backend_unavailable(caplog):
    caplog.set_level(logging.ERROR)
    with pytest.raises(BackendUnavailable) as ei:
        with store_errors("list flowers"):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
    assert ei.value.message == "Backing store unavailable"
    assert "list flowers failed" in caplog.text


def test_other_sqlalchemy_error_becomes_backend_unavailable():
    with pytest.raises(BackendUnavailable):
        with store_errors("get bouquet"):
            raise NoResultFound("nothing")


def test_domain_errors_are_untouched():
    with pytest.raises(InvalidInput) as ei:
        with store_errors("create flower"):
            raise InvalidInput("category_id refers to a missing row", field="category_id")
    assert ei.value.field == "category_id"


def test_unrelated_exceptions_propagate():
    with pytest.raises(KeyError):
        with store_errors("anything"):
            raise KeyError("x")
