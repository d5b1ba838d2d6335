"""Contract tests for InMemoryProductRepository."""

import pytest

from ims.domain.exceptions import DuplicateKeyError, NotFoundError
from ims.domain.model.product import ProductKind
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import make_digital, make_physical


@pytest.fixture
def repo() -> InMemoryProductRepository:
    return InMemoryProductRepository([
        make_physical(id="F01", name="Laptop Dell"),
        make_digital(id="D01", name="Java Course"),
        make_physical(id="F02", name="USB Cable"),
    ])


class TestAddRemove:

    def test_add_and_count(self, repo):
        repo.add(make_digital(id="D02"))
        assert repo.count() == 4
        assert repo.exists("D02")

    def test_duplicate_rejected_first_retained(self, repo):
        first = repo.get_by_id("F01")
        with pytest.raises(DuplicateKeyError):
            repo.add(make_digital(id="F01"))
        assert repo.get_by_id("F01") is first
        assert repo.count() == 3

    def test_duplicates_in_initial_list_rejected(self):
        with pytest.raises(DuplicateKeyError):
            InMemoryProductRepository([make_physical(), make_physical()])

    def test_remove(self, repo):
        repo.remove("D01")
        assert repo.get_by_id("D01") is None
        assert not repo.exists("D01")
        assert repo.count() == 2

    def test_remove_unknown(self, repo):
        with pytest.raises(NotFoundError):
            repo.remove("nope")

    def test_id_can_be_reused_after_removal(self, repo):
        repo.remove("F01")
        repo.add(make_digital(id="F01"))
        assert repo.get_by_id("F01").kind is ProductKind.DIGITAL


class TestQueries:

    def test_get_missing_returns_none(self, repo):
        assert repo.get_by_id("X") is None

    def test_name_search_is_case_insensitive(self, repo):
        assert [p.id for p in repo.find_by_name_contains("JAVA")] == ["D01"]

    def test_name_search_substring(self, repo):
        assert [p.id for p in repo.find_by_name_contains("l")] == ["F01", "F02"]

    @pytest.mark.parametrize("fragment", ["", "  "])
    def test_blank_name_search_returns_nothing(self, repo, fragment):
        assert repo.find_by_name_contains(fragment) == []

    def test_list_all_preserves_insertion_order(self, repo):
        assert [p.id for p in repo.list_all()] == ["F01", "D01", "F02"]

    def test_list_by_kind(self, repo):
        assert [p.id for p in repo.list_by_kind(ProductKind.PHYSICAL)] == ["F01", "F02"]
        assert [p.id for p in repo.list_by_kind(ProductKind.DIGITAL)] == ["D01"]

    def test_snapshots_cannot_reshape_the_store(self, repo):
        snapshot = repo.list_all()
        snapshot.clear()
        repo.list_by_kind(ProductKind.PHYSICAL).pop()
        assert repo.count() == 3
