# tests/database/test_bouquet_repo.py
import uuid
from decimal import Decimal

import pytest

from flowershop.database.repos.bouquet_repo import SqlAlchemyBouquetRepo
from flowershop.database.repos.flower_repo import SqlAlchemyFlowerRepo
from flowershop.domain.errors import InvalidInput
from flowershop.services.schemas import (
    BouquetCreate, BouquetUpdate, CompositionEntry, FlowerCreate,
)


def _mk_bouquet(repo, name="Spring Mix", price="29.90", **kw):
    return repo.create(BouquetCreate(name=name, price=Decimal(price), **kw))


def _mk_flowers(db, *names):
    repo = SqlAlchemyFlowerRepo(db)
    return [repo.create(FlowerCreate(name=n, price=Decimal("2.00"))) for n in names]


def test_bouquet_crud(db):
    repo = SqlAlchemyBouquetRepo(db)
    b = _mk_bouquet(repo, discount_price=Decimal("24.90"))
    assert b.effective_price == Decimal("24.90")
    assert b.in_stock is True and b.featured is False

    assert repo.get_by_id(b.id).name == "Spring Mix"
    upd = repo.update(b.id, BouquetUpdate(featured=True))
    assert upd.featured is True and upd.price == Decimal("29.90")

    assert repo.delete(b.id) is True
    assert repo.get_by_id(b.id) is None
    assert repo.delete(b.id) is False
    assert repo.update(b.id, BouquetUpdate(name="x")) is None


def test_list_featured(db):
    repo = SqlAlchemyBouquetRepo(db)
    assert repo.list_featured() == []
    _mk_bouquet(repo, name="Plain")
    star = _mk_bouquet(repo, name="Star", featured=True)
    assert [b.id for b in repo.list_featured()] == [star.id]


def test_composition_roundtrip_keeps_order(db):
    repo = SqlAlchemyBouquetRepo(db)
    b = _mk_bouquet(repo)
    rose, tulip, lily = _mk_flowers(db, "Rose", "Tulip", "Lily")

    rows = repo.set_composition(b.id, [
        CompositionEntry(flower_id=tulip.id, quantity=5),
        CompositionEntry(flower_id=rose.id, quantity=3),
    ])
    assert [(r.flower_id, r.quantity) for r in rows] == [(tulip.id, 5), (rose.id, 3)]

    # replace wholesale
    rows = repo.set_composition(b.id, [(lily.id, 1)])
    assert [(r.flower_id, r.quantity) for r in repo.get_composition(b.id)] == [(lily.id, 1)]

    assert repo.set_composition(b.id, []) == []
    assert repo.get_composition(b.id) == []


def test_set_composition_validation(db):
    repo = SqlAlchemyBouquetRepo(db)
    b = _mk_bouquet(repo)
    (rose,) = _mk_flowers(db, "Rose")
    repo.set_composition(b.id, [(rose.id, 2)])

    with pytest.raises(InvalidInput):
        repo.set_composition(b.id, [(rose.id, 1), (uuid.uuid4(), 1)])
    with pytest.raises(InvalidInput):
        repo.set_composition(b.id, [(rose.id, 1), (rose.id, 2)])
    with pytest.raises(InvalidInput):
        repo.set_composition(b.id, [(rose.id, 0)])

    # nothing was written by the rejected calls
    assert [(r.flower_id, r.quantity) for r in repo.get_composition(b.id)] == [(rose.id, 2)]
    assert repo.set_composition(uuid.uuid4(), [(rose.id, 1)]) is None


def test_add_and_remove_flower(db):
    repo = SqlAlchemyBouquetRepo(db)
    b = _mk_bouquet(repo)
    rose, tulip = _mk_flowers(db, "Rose", "Tulip")

    assert repo.add_flower(b.id, rose.id, 2).quantity == 2
    assert repo.add_flower(b.id, tulip.id).quantity == 1
    # re-adding overwrites quantity instead of duplicating
    assert repo.add_flower(b.id, rose.id, 6).quantity == 6
    assert [(r.flower_id, r.quantity) for r in repo.get_composition(b.id)] == [(rose.id, 6), (tulip.id, 1)]

    with pytest.raises(InvalidInput):
        repo.add_flower(b.id, uuid.uuid4())
    assert repo.add_flower(uuid.uuid4(), rose.id) is None

    assert repo.remove_flower(b.id, rose.id) is True
    assert repo.remove_flower(b.id, rose.id) is False
    assert [r.flower_id for r in repo.get_composition(b.id)] == [tulip.id]


def test_deleting_a_flower_removes_it_from_compositions(db):
    repo = SqlAlchemyBouquetRepo(db)
    flowers = SqlAlchemyFlowerRepo(db)
    b = _mk_bouquet(repo)
    rose, tulip = _mk_flowers(db, "Rose", "Tulip")
    repo.set_composition(b.id, [(rose.id, 1), (tulip.id, 1)])

    assert flowers.delete(rose.id)
    assert [r.flower_id for r in repo.get_composition(b.id)] == [tulip.id]


def test_unknown_bouquet_has_empty_composition(db):
    assert SqlAlchemyBouquetRepo(db).get_composition(uuid.uuid4()) == []


def test_search_filters(db):
    repo = SqlAlchemyBouquetRepo(db)
    cheap = _mk_bouquet(repo, name="Cheap", price="10.00", in_stock=False)
    mid = _mk_bouquet(repo, name="Mid", price="25.00", featured=True, description="Peony heavy")
    grand = _mk_bouquet(repo, name="Grand", price="80.00", featured=True)

    def ids(**kw):
        return [b.id for b in repo.search(**kw)]

    assert ids() == [cheap.id, grand.id, mid.id]
    # description matches as well as name
    assert ids(q="peony") == [mid.id]
    assert ids(q="GRAND") == [grand.id]
    assert ids(featured=True) == [grand.id, mid.id]
    assert ids(featured=False) == [cheap.id]
    assert ids(in_stock=False) == [cheap.id]
    # bounds are inclusive
    assert ids(min_price=Decimal("25.00"), max_price=Decimal("80.00")) == [grand.id, mid.id]
    assert ids(max_price=Decimal("10.00")) == [cheap.id]
    assert ids(featured=True, max_price=Decimal("30")) == [mid.id]
    assert ids(limit=1) == [cheap.id]

    with pytest.raises(InvalidInput):
        repo.search(min_price=Decimal("50"), max_price=Decimal("10"))
