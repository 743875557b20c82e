from elastic_builder.query import (
    MatchAllQuery,
    Query,
    QueryStringQuery,
    RawQuery,
    TermQuery,
)


def test_match_all():
    assert MatchAllQuery().source() == {"match_all": {}}
    assert MatchAllQuery(boost=1.5).source() == {"match_all": {"boost": 1.5}}


def test_term():
    assert TermQuery("user", "olivere").source() == {"term": {"user": "olivere"}}


def test_query_string_omits_unset_default_field():
    assert QueryStringQuery("status:active").source() == {
        "query_string": {"query": "status:active"}
    }
    assert QueryStringQuery("bob", default_field="owner").source() == {
        "query_string": {"query": "bob", "default_field": "owner"}
    }


def test_raw_query_passes_body_through():
    body = {"range": {"age": {"gte": 18}}}
    assert RawQuery(body).source() == body


def test_concrete_queries_satisfy_protocol():
    for query in (MatchAllQuery(), TermQuery("a", 1), QueryStringQuery("x"), RawQuery({})):
        assert isinstance(query, Query)
