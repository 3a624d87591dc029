# tests/database/test_row_mapping.py
import uuid
from decimal import Decimal
from types import SimpleNamespace

import pytest

from flowershop.database.repos._mapping import to_domain_bouquet, to_domain_flower, to_domain_tag
from flowershop.domain.errors import InvalidInput, StoredDataError


def _flower_row(**kw):
    row = dict(
        id=uuid.uuid4(), name="Rose", price=Decimal("2.50"), description=None,
        scientific_name=None, category_id=None, in_stock=3, low_stock_threshold=0,
        is_available=True, media=[], tags=[], colors=[],
    )
    row.update(kw)
    return SimpleNamespace(**row)


def test_valid_row_maps():
    f = to_domain_flower(_flower_row())
    assert f.name == "Rose" and f.colors == []


def test_invalid_stored_row_is_a_data_fault_not_caller_input():
    row = _flower_row(name="  ")
    with pytest.raises(StoredDataError) as ei:
        to_domain_flower(row)
    assert not isinstance(ei.value, InvalidInput)
    assert str(row.id) in ei.value.message


def test_nested_rows_are_checked_too():
    bad_tag = SimpleNamespace(id=uuid.uuid4(), name="")
    with pytest.raises(StoredDataError):
        to_domain_tag(bad_tag)

    bouquet = SimpleNamespace(
        id=uuid.uuid4(), name="Mix", price=Decimal("-1"), discount_price=None, description=None,
        category_id=None, featured=False, in_stock=True, media=[], tags=[],
    )
    with pytest.raises(StoredDataError):
        to_domain_bouquet(bouquet)
