# tests/database/test_tag_repo.py
import uuid
from decimal import Decimal

import pytest

from flowershop.database.repos.bouquet_repo import SqlAlchemyBouquetRepo
from flowershop.database.repos.flower_repo import SqlAlchemyFlowerRepo
from flowershop.database.repos.tag_repo import SqlAlchemyTagRepo
from flowershop.domain.errors import InvalidInput
from flowershop.services.schemas import BouquetCreate, FlowerCreate, TagCreate, TagUpdate


def test_tag_crud(db):
    repo = SqlAlchemyTagRepo(db)
    t = repo.create(TagCreate(name="romantic"))
    assert repo.get_by_id(t.id).name == "romantic"
    assert repo.get_by_name("ROMANTIC").id == t.id

    assert repo.update(t.id, TagUpdate(name="love")).name == "love"
    assert repo.update(uuid.uuid4(), TagUpdate(name="x")) is None

    assert repo.delete(t.id) is True
    assert repo.delete(t.id) is False


def test_duplicate_names_rejected(db):
    repo = SqlAlchemyTagRepo(db)
    repo.create(TagCreate(name="pastel"))
    other = repo.create(TagCreate(name="bright"))
    with pytest.raises(InvalidInput):
        repo.create(TagCreate(name="Pastel"))
    with pytest.raises(InvalidInput):
        repo.update(other.id, TagUpdate(name="pastel"))


def test_bouquet_tag_sets(db):
    tags = SqlAlchemyTagRepo(db)
    bouquet = SqlAlchemyBouquetRepo(db).create(BouquetCreate(name="Mix", price=Decimal("10")))
    a, b, c = (tags.create(TagCreate(name=n)) for n in ("spring", "gift", "pastel"))

    assert [t.name for t in tags.set_bouquet_tags(bouquet.id, [a.id, b.id, a.id])] == ["gift", "spring"]
    assert [t.name for t in tags.set_bouquet_tags(bouquet.id, [c.id])] == ["pastel"]
    assert [t.name for t in tags.list_for_bouquet(bouquet.id)] == ["pastel"]
    # the bouquet entity carries its tags too
    assert [t.name for t in SqlAlchemyBouquetRepo(db).get_by_id(bouquet.id).tags] == ["pastel"]

    with pytest.raises(InvalidInput):
        tags.set_bouquet_tags(bouquet.id, [uuid.uuid4()])
    assert tags.set_bouquet_tags(uuid.uuid4(), [a.id]) is None
    assert tags.set_bouquet_tags(bouquet.id, []) == []


def test_flower_tag_sets(db):
    tags = SqlAlchemyTagRepo(db)
    flower = SqlAlchemyFlowerRepo(db).create(FlowerCreate(name="Rose", price=Decimal("2")))
    t = tags.create(TagCreate(name="classic"))

    assert [x.id for x in tags.set_flower_tags(flower.id, [t.id])] == [t.id]
    assert [x.id for x in tags.list_for_flower(flower.id)] == [t.id]

    # deleting the tag drops the link
    tags.delete(t.id)
    assert tags.list_for_flower(flower.id) == []
