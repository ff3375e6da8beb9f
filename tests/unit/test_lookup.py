from ah.core.lookup import find_all_by_name, find_by_name
from ah.core.models import Instance


def make_instance(instance_id: str, name: str | None) -> Instance:
    return Instance(
        name=name,
        id=instance_id,
        instance_type="t3.micro",
        private_address="",
        public_address=None,
        state="running",
    )


INSTANCES = [
    make_instance("i-1", "web-1"),
    make_instance("i-2", None),
    make_instance("i-3", "dup"),
    make_instance("i-4", "dup"),
]


def test_find_by_name_exact_match():
    assert find_by_name(INSTANCES, "web-1").id == "i-1"


def test_find_by_name_not_found():
    assert find_by_name(INSTANCES, "nonexistent") is None


def test_find_by_name_no_partial_or_case_insensitive_match():
    assert find_by_name(INSTANCES, "web") is None
    assert find_by_name(INSTANCES, "WEB-1") is None


def test_find_by_name_empty_listing():
    assert find_by_name([], "web-1") is None


def test_find_by_name_skips_unnamed_instances():
    assert find_by_name(INSTANCES, "") is None


def test_duplicate_names_return_first_in_order():
    first = find_by_name(INSTANCES, "dup")
    second = find_by_name(INSTANCES, "dup")

    assert first.id == "i-3"
    assert second is first


def test_find_by_name_does_not_mutate_input():
    snapshot = list(INSTANCES)

    find_by_name(INSTANCES, "web-1")

    assert INSTANCES == snapshot


def test_find_all_by_name_preserves_order():
    assert [i.id for i in find_all_by_name(INSTANCES, "dup")] == ["i-3", "i-4"]
    assert find_all_by_name(INSTANCES, "nonexistent") == []
