# tests/database/test_category_repo.py
import uuid
from decimal import Decimal

import pytest

from flowershop.database.repos.bouquet_repo import SqlAlchemyBouquetRepo
from flowershop.database.repos.category_repo import SqlAlchemyCategoryRepo
from flowershop.database.repos.flower_repo import SqlAlchemyFlowerRepo
from flowershop.domain.errors import InvalidInput
from flowershop.services.schemas import (
    BouquetCreate, CategoryCreate, CategoryUpdate, FlowerCreate,
)


def test_category_crud(db):
    repo = SqlAlchemyCategoryRepo(db)
    c = repo.create(CategoryCreate(name="  Roses ", description="All roses"))
    assert c.name == "Roses"

    assert repo.get_by_id(c.id).description == "All roses"
    assert repo.update(c.id, CategoryUpdate(description="Red and white")).description == "Red and white"
    assert repo.update(uuid.uuid4(), CategoryUpdate(name="x")) is None

    assert repo.delete(c.id) is True
    assert repo.get_by_id(c.id) is None
    assert repo.delete(c.id) is False


def test_names_are_unique_case_insensitively(db):
    repo = SqlAlchemyCategoryRepo(db)
    a = repo.create(CategoryCreate(name="Weddings"))
    b = repo.create(CategoryCreate(name="Funerals"))
    with pytest.raises(InvalidInput):
        repo.create(CategoryCreate(name="weddings"))
    with pytest.raises(InvalidInput):
        repo.update(b.id, CategoryUpdate(name="WEDDINGS"))
    # renaming to its own name is fine
    assert repo.update(a.id, CategoryUpdate(name="Weddings")).id == a.id


def test_get_all_ordered(db):
    repo = SqlAlchemyCategoryRepo(db)
    for n in ("Seasonal", "Birthday", "Romance"):
        repo.create(CategoryCreate(name=n))
    assert [c.name for c in repo.get_all()] == ["Birthday", "Romance", "Seasonal"]


def test_delete_keeps_members_with_cleared_category(db):
    cats = SqlAlchemyCategoryRepo(db)
    flowers = SqlAlchemyFlowerRepo(db)
    bouquets = SqlAlchemyBouquetRepo(db)

    c = cats.create(CategoryCreate(name="Spring"))
    f = flowers.create(FlowerCreate(name="Tulip", price=Decimal("1.00"), category_id=c.id))
    b = bouquets.create(BouquetCreate(name="Spring Mix", price=Decimal("20.00"), category_id=c.id))

    assert cats.delete(c.id)
    assert flowers.get_by_id(f.id).category_id is None
    assert bouquets.get_by_id(b.id).category_id is None
