import pytest

from app.db.filters import And, CategoryMatch, ExcludeId, TextMatch, compile_filter, related_to, title_and_category


def test_text_match_is_escaped_and_case_insensitive():
    assert compile_filter(TextMatch("title", "a.b")) == {"title": {"$regex": r"a\.b", "$options": "i"}}


def test_category_match():
    assert compile_filter(CategoryMatch("cat-1")) == {"category": "cat-1"}


def test_unresolved_category_matches_nothing():
    assert compile_filter(CategoryMatch(None)) == {"category": {"$in": []}}


def test_exclude_id():
    assert compile_filter(ExcludeId("evt-1")) == {"_id": {"$ne": "evt-1"}}


def test_empty_and_is_unconstrained():
    assert compile_filter(And()) == {}


def test_single_clause_and_is_unwrapped():
    assert compile_filter(And(CategoryMatch("cat-1"))) == {"category": "cat-1"}


def test_nested_and():
    expr = And(TextMatch("title", "jazz"), And(CategoryMatch("cat-1"), ExcludeId("evt-1")))

    assert compile_filter(expr) == {
        "$and": [
            {"title": {"$regex": "jazz", "$options": "i"}},
            {"$and": [{"category": "cat-1"}, {"_id": {"$ne": "evt-1"}}]},
        ]
    }


@pytest.mark.parametrize("query", [None, ""])
def test_listing_without_query_or_category(query):
    assert compile_filter(title_and_category(query, None)) == {}


def test_listing_with_query_and_category():
    assert compile_filter(title_and_category("jazz", CategoryMatch("cat-1"))) == {
        "$and": [{"title": {"$regex": "jazz", "$options": "i"}}, {"category": "cat-1"}]
    }


def test_related_to():
    assert compile_filter(related_to("cat-1", "evt-1")) == {
        "$and": [{"category": "cat-1"}, {"_id": {"$ne": "evt-1"}}]
    }


def test_unknown_expression_is_rejected():
    with pytest.raises(TypeError):
        compile_filter({"title": "raw"})
