from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from companies_api.core.errors import CompanyNotFound, InvalidPayload
from companies_api.crud.companies import CompanyRegistry
from companies_api.models.company import Company

SEED = [
    {"id": 1, "name": "Acme Corp", "industry": "Technology", "address": "123 Tech Lane"},
    {"id": 2, "name": "Beta Ltd", "industry": "Finance", "address": "456 Finance Road"},
]


def _all(registry: CompanyRegistry) -> list[dict]:
    return [registry.get(s["id"]).to_dict() for s in registry.list_summaries()]


def test_starts_with_seed_data(registry):
    assert _all(registry) == SEED
    assert registry.next_id == 3
    assert len(registry) == 2


def test_create_assigns_counter_and_advances(registry):
    before = registry.next_id
    company = registry.create("Gamma", "Retail")
    assert company.id == before
    assert registry.next_id == before + 1
    assert company.to_dict() == {"id": 3, "name": "Gamma", "industry": "Retail", "address": ""}

    second = registry.create("Delta", "Energy", "1 Grid St")
    assert second.id == 4
    assert second.address == "1 Grid St"


@pytest.mark.parametrize(
    "name,industry",
    [(None, "Retail"), ("Gamma", None), ("", "Retail"), ("Gamma", ""), (None, None)],
)
def test_create_requires_name_and_industry(registry, name, industry):
    with pytest.raises(InvalidPayload):
        registry.create(name, industry)
    assert len(registry) == 2
    assert registry.next_id == 3


def test_list_is_projection_in_insertion_order(registry):
    registry.create("Gamma", "Retail")
    registry.delete(1)
    registry.create("Delta", "Energy")
    assert registry.list_summaries() == [
        {"id": 2, "name": "Beta Ltd"},
        {"id": 3, "name": "Gamma"},
        {"id": 4, "name": "Delta"},
    ]


def test_get_unknown_or_missing_id(registry):
    with pytest.raises(CompanyNotFound):
        registry.get(99)
    with pytest.raises(CompanyNotFound):
        registry.get(None)


def test_returned_records_are_copies(registry):
    company = registry.get(1)
    company.name = "Mutated"
    assert registry.get(1).name == "Acme Corp"


def test_delete_then_get_is_not_found(registry):
    registry.delete(2)
    with pytest.raises(CompanyNotFound):
        registry.get(2)
    with pytest.raises(CompanyNotFound):
        registry.delete(2)
    assert registry.list_summaries() == [{"id": 1, "name": "Acme Corp"}]


def test_ids_are_not_reused_after_delete(registry):
    created = registry.create("Gamma", "Retail")
    registry.delete(created.id)
    assert registry.create("Delta", "Energy").id == created.id + 1


def test_update_only_address(registry):
    updated = registry.update(1, address="1 New Street")
    assert updated.to_dict() == {
        "id": 1,
        "name": "Acme Corp",
        "industry": "Technology",
        "address": "1 New Street",
    }
    assert registry.get(1).address == "1 New Street"


def test_update_ignores_empty_values_by_default(registry):
    updated = registry.update(1, name="Acme Corporation", address="")
    assert updated.name == "Acme Corporation"
    assert updated.address == "123 Tech Lane"


def test_update_with_nothing_effective_is_invalid(registry):
    with pytest.raises(InvalidPayload):
        registry.update(1)
    with pytest.raises(InvalidPayload):
        registry.update(1, name="", industry="", address="")
    assert registry.get(1).to_dict() == SEED[0]


def test_update_unknown_id_wins_over_empty_patch(registry):
    with pytest.raises(CompanyNotFound):
        registry.update(99)


def test_update_can_accept_empty_values_when_enabled():
    registry = CompanyRegistry(accept_empty_values=True)
    updated = registry.update(2, address="")
    assert updated.address == ""
    assert updated.name == "Beta Ltd"


def test_reset_restores_seed_after_mutations(registry):
    registry.create("Gamma", "Retail")
    registry.update(1, name="Changed")
    registry.delete(2)

    registry.reset()

    assert _all(registry) == SEED
    assert registry.next_id == 3
    assert registry.create("Again", "Retail").id == 3


def test_custom_seed_sets_next_id():
    registry = CompanyRegistry([Company(id=10, name="Ten", industry="Misc")])
    assert registry.next_id == 11
    assert registry.list_summaries() == [{"id": 10, "name": "Ten"}]


def test_empty_seed():
    registry = CompanyRegistry([])
    assert len(registry) == 0
    assert registry.create("First", "Misc").id == 1


def test_concurrent_creates_get_distinct_ids(registry):
    n = 200
    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(pool.map(lambda i: registry.create(f"Co {i}", "Misc"), range(n)))

    ids = [c.id for c in created]
    assert len(set(ids)) == n
    assert sorted(ids) == list(range(3, 3 + n))
    assert registry.next_id == 3 + n
    assert len(registry) == 2 + n
