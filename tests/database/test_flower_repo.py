# tests/database/test_flower_repo.py
import uuid
from decimal import Decimal

import pytest

from flowershop.database.repos.category_repo import SqlAlchemyCategoryRepo
from flowershop.database.repos.flower_repo import SqlAlchemyFlowerRepo
from flowershop.domain.errors import InvalidInput
from flowershop.services.schemas import CategoryCreate, FlowerCreate, FlowerUpdate


def _mk_flower(repo, name="Rose", price="2.50", **kw):
    return repo.create(FlowerCreate(name=name, price=Decimal(price), **kw))


def test_flower_crud(db):
    repo = SqlAlchemyFlowerRepo(db)

    f = _mk_flower(repo, scientific_name="Rosa", in_stock=12)
    assert f.id is not None and f.id.version == 4
    assert f.price == Decimal("2.50")
    assert f.date_created is not None

    got = repo.get_by_id(str(f.id).upper())
    assert got is not None and got.name == "Rose" and got.in_stock == 12

    upd = repo.update(f.id, FlowerUpdate(price=Decimal("3.00")))
    assert upd.price == Decimal("3.00")
    # fields not sent are untouched
    assert upd.scientific_name == "Rosa" and upd.in_stock == 12

    assert repo.delete(f.id) is True
    assert repo.get_by_id(f.id) is None
    assert repo.delete(f.id) is False


def test_missing_rows_are_not_errors(db):
    repo = SqlAlchemyFlowerRepo(db)
    ghost = uuid.uuid4()
    assert repo.get_by_id(ghost) is None
    assert repo.update(ghost, FlowerUpdate(name="x")) is None
    assert repo.delete(ghost) is False


@pytest.mark.parametrize("bad", ["123", "", "not-a-uuid", None])
def test_malformed_ids_rejected(db, bad):
    repo = SqlAlchemyFlowerRepo(db)
    with pytest.raises(InvalidInput):
        repo.get_by_id(bad)


def test_get_all_is_ordered_by_name_then_id(db):
    repo = SqlAlchemyFlowerRepo(db)
    for name in ("Tulip", "Aster", "Lily", "Aster"):
        _mk_flower(repo, name=name)

    rows = repo.get_all()
    names = [f.name for f in rows]
    assert names == sorted(names)
    asters = [f.id for f in rows if f.name == "Aster"]
    assert asters == sorted(asters)
    assert len({f.id for f in rows}) == len(rows)
    assert [f.id for f in repo.get_all()] == [f.id for f in rows]


def test_get_all_available_only(db):
    repo = SqlAlchemyFlowerRepo(db)
    _mk_flower(repo, name="Shown")
    _mk_flower(repo, name="Hidden", is_available=False)
    assert [f.name for f in repo.get_all(available_only=True)] == ["Shown"]


def test_get_by_ids_skips_unknown(db):
    repo = SqlAlchemyFlowerRepo(db)
    a, b = _mk_flower(repo, name="A"), _mk_flower(repo, name="B")
    rows = repo.get_by_ids([b.id, str(a.id), uuid.uuid4(), a.id])
    assert [f.id for f in rows] == [a.id, b.id]
    assert repo.get_by_ids([]) == []


def test_search_matches_name_description_and_scientific_name(db):
    repo = SqlAlchemyFlowerRepo(db)
    _mk_flower(repo, name="Red Rose")
    _mk_flower(repo, name="Peony", description="Lush, rose-scented petals")
    _mk_flower(repo, name="Sunflower", scientific_name="Helianthus annuus")

    assert {f.name for f in repo.search("ROSE")} == {"Red Rose", "Peony"}
    assert [f.name for f in repo.search("helianthus")] == ["Sunflower"]
    assert len(repo.search("", limit=2)) == 2


def test_category_link_is_checked(db):
    repo = SqlAlchemyFlowerRepo(db)
    cat = SqlAlchemyCategoryRepo(db).create(CategoryCreate(name="Seasonal"))

    f = _mk_flower(repo, category_id=cat.id)
    assert [x.id for x in repo.list_by_category(cat.id)] == [f.id]

    with pytest.raises(InvalidInput) as ei:
        _mk_flower(repo, name="Orphan", category_id=uuid.uuid4())
    assert ei.value.field == "category_id"

    with pytest.raises(InvalidInput):
        repo.update(f.id, FlowerUpdate(category_id=uuid.uuid4()))

    cleared = repo.update(f.id, FlowerUpdate(category_id=None))
    assert cleared.category_id is None


def test_required_fields_cannot_be_nulled(db):
    repo = SqlAlchemyFlowerRepo(db)
    f = _mk_flower(repo)
    with pytest.raises(InvalidInput):
        repo.update(f.id, FlowerUpdate(price=None))


def test_blank_names_rejected_before_write(db):
    repo = SqlAlchemyFlowerRepo(db)
    with pytest.raises(InvalidInput) as ei:
        _mk_flower(repo, name="   ")
    assert ei.value.field == "name"
    assert repo.get_all() == []

    f = _mk_flower(repo)
    with pytest.raises(InvalidInput):
        repo.update(f.id, FlowerUpdate(name=" "))
    assert repo.get_by_id(f.id).name == "Rose"
