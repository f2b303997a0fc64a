from datetime import datetime, timedelta

import pytest

from projecthub.client import (
    Project,
    available_tags,
    filter_projects,
    merge_append,
    merge_remove,
    merge_replace,
)

BASE = datetime(2024, 1, 1, 12, 0, 0)


def project(pid, name, description=None, tags=(), age=0):
    stamp = BASE - timedelta(hours=age)
    return Project(
        id=pid,
        user_id="owner",
        name=name,
        description=description,
        tags=list(tags),
        created_at=stamp,
        updated_at=stamp,
    )


@pytest.fixture
def projects():
    return [
        project("1", "Alpha", "Payments service", ["backend", "api"], age=0),
        project("2", "Beta", "Landing page", ["frontend"], age=1),
        project("3", "Gamma", "Alpine weather scraper", ["backend"], age=2),
        project("4", "Delta", None, ["ALPS", "backend"], age=3),
        project("5", "Epsilon", "alpha release notes", ["docs"], age=4),
    ]


def ids(items):
    return [p.id for p in items]


def test_query_and_tags_scenario(projects):
    result = filter_projects(projects, "alp", {"backend"})

    assert ids(result) == ["1", "3", "4"]


def test_query_matches_name_description_or_tag_case_insensitively(projects):
    assert ids(filter_projects(projects, "ALP")) == ["1", "3", "4", "5"]
    assert ids(filter_projects(projects, "landing")) == ["2"]


def test_tags_match_exactly_and_all_are_required(projects):
    assert ids(filter_projects(projects, "", {"Backend"})) == []
    assert ids(filter_projects(projects, "", {"backend", "api"})) == ["1"]


def test_empty_filters_return_everything_in_order(projects):
    assert ids(filter_projects(projects)) == ids(projects)
    assert ids(filter_projects(projects, None, None)) == ids(projects)


def test_whitespace_query_is_matched_literally(projects):
    # Only projects whose text contains a space
    assert ids(filter_projects(projects, " ")) == ["1", "2", "3", "5"]
    assert ids(filter_projects(projects, "   ")) == []
    assert ids(filter_projects(projects, " page")) == ["2"]


@pytest.mark.parametrize(
    "query,tags",
    [("alp", {"backend"}), ("", {"frontend"}), ("a", set()), ("zzz", {"docs"})],
)
def test_predicates_commute_and_are_idempotent(projects, query, tags):
    query_first = filter_projects(filter_projects(projects, query), "", tags)
    tags_first = filter_projects(filter_projects(projects, "", tags), query)
    combined = filter_projects(projects, query, tags)

    assert ids(query_first) == ids(tags_first) == ids(combined)
    assert ids(filter_projects(combined, query, tags)) == ids(combined)


def test_available_tags_is_sorted_union(projects):
    assert available_tags(projects) == ["ALPS", "api", "backend", "docs", "frontend"]


def test_merge_append_puts_new_project_first(projects):
    new = project("6", "Zeta")

    merged = merge_append(projects, new)

    assert ids(merged) == ["6", "1", "2", "3", "4", "5"]
    assert len(projects) == 5


def test_merge_replace_moves_updated_project_to_front(projects):
    updated = project("3", "Gamma v2", tags=["backend"], age=-1)

    merged = merge_replace(projects, updated)

    assert ids(merged) == ["3", "1", "2", "4", "5"]
    assert merged[0].name == "Gamma v2"


def test_merge_remove_drops_by_id(projects):
    assert ids(merge_remove(projects, "2")) == ["1", "3", "4", "5"]
    assert ids(merge_remove(projects, "missing")) == ids(projects)
