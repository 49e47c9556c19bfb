from datetime import datetime

import pytest

from contentkit.query import Query, QueryError

MOMENT = datetime(2024, 1, 2, 3, 4, 5)
MOMENT_TEXT = "2024-01-02 03:04:05"


def test_include():
    assert str(Query().include(5)) == "include=5"


def test_include_out_of_range():
    with pytest.raises(QueryError):
        str(Query().include(11))


def test_content_type():
    assert str(Query().content_type("content_type")) == "content_type=content_type"


def test_select():
    q = Query().content_type("ct").select(["field1", "field2"])
    assert q.values() == {"content_type": "ct", "select": "field1,field2"}
    assert str(q) == "content_type=ct&select=field1%2Cfield2"


def test_select_needs_content_type():
    with pytest.raises(QueryError):
        str(Query().select(["field1", "field2"]))


def test_select_too_many_fields():
    fields = [f"field{i}" for i in range(110)]
    with pytest.raises(QueryError):
        str(Query().select(fields))


def test_select_too_deep():
    with pytest.raises(QueryError):
        str(Query().select(["field1", "field2.d1", "field3.d2.d3"]))


def test_equal():
    q = Query().equal("field1", 10)
    assert str(q) == "field1=10"
    q = q.equal("field1", "11")
    assert str(q) == "field1=11"
    q = q.equal("field1", MOMENT)
    assert str(q) == ""


def test_not_equal():
    q = Query().not_equal("field1", 10)
    assert q.values() == {"field1[ne]": "10"}
    assert str(q) == "field1%5Bne%5D=10"
    q = q.not_equal("field1", "11")
    assert q.values() == {"field1[ne]": "11"}
    q = q.not_equal("field1", MOMENT)
    assert str(q) == ""


def test_all():
    q = Query().all("field1", ["10", "test"])
    assert q.values() == {"field1[all]": "10,test"}
    assert str(q) == "field1%5Ball%5D=10%2Ctest"


def test_in():
    q = Query().in_("sys.id", ["test", "test2"])
    assert str(q) == "sys.id%5Bin%5D=test%2Ctest2"


def test_not_in():
    assert Query().not_in("sys.id", ["test3"]).values() == {"sys.id[nin]": "test3"}


def test_exists():
    assert str(Query().exists("sys.id")) == "sys.id%5Bexists%5D=true"


def test_not_exists():
    assert str(Query().not_exists("sys.id")) == "sys.id%5Bexists%5D=false"


@pytest.mark.parametrize(
    "method, suffix",
    [
        ("less_than", "[lt]"),
        ("less_than_or_equal", "[lte]"),
        ("greater_than", "[gt]"),
        ("greater_than_or_equal", "[gte]"),
    ],
)
def test_comparisons(method, suffix):
    q = getattr(Query(), method)("fields.date", 10)
    assert q.values() == {"fields.date" + suffix: "10"}
    q = getattr(Query(), method)("fields.date", MOMENT)
    assert q.values() == {"fields.date" + suffix: MOMENT_TEXT}


def test_comparison_drops_strings():
    assert Query().less_than("fields.date", "10").values() == {}


def test_query():
    assert str(Query().query("query_str")) == "query=query_str"


def test_match():
    assert Query().match("field1", "match_query").values() == {"field1[match]": "match_query"}


def test_near():
    q = Query().near("field1", 38, -120)
    assert q.values() == {"field1[near]": "38,-120"}
    assert str(q) == "field1%5Bnear%5D=38%2C-120"


def test_within():
    q = Query().within("field1", 38, -120, 10, 120)
    assert q.values() == {"field1[within]": "38,-120,10,120"}


def test_within_radius():
    q = Query().within_radius("field1", 38, -120, 22)
    assert q.values() == {"field1[within]": "38,-120,22"}


def test_order():
    q = Query().content_type("ct").order("field1", False)
    assert str(q) == "content_type=ct&order=field1"
    q = Query().content_type("ct").order("field1", True)
    assert str(q) == "content_type=ct&order=-field1"
    q = (
        Query()
        .content_type("ct")
        .order("field1", True)
        .order("field2", False)
        .order("field3", False)
    )
    assert q.values() == {"content_type": "ct", "order": "-field1,field2,field3"}


def test_limit():
    assert str(Query().limit(10)) == "limit=10"


def test_limit_out_of_range():
    with pytest.raises(QueryError):
        str(Query().limit(3000))


def test_skip():
    assert str(Query().skip(10)) == "skip=10"


def test_mime_type():
    assert str(Query().mime_type("image")) == "mimetype_group=image"


def test_locale():
    assert Query().locale("de").values() == {"locale": "de"}


def test_combined():
    q = (
        Query()
        .equal("cat.name", "catname")
        .not_equal("cat.name", "dogname")
        .in_("sys.id", ["test", "test2"])
        .not_in("sys.id", ["test3"])
        .less_than("fields.cat", 4)
    )
    assert str(q) == (
        "cat.name=catname&cat.name%5Bne%5D=dogname&fields.cat%5Blt%5D=4"
        "&sys.id%5Bin%5D=test%2Ctest2&sys.id%5Bnin%5D=test3"
    )


def test_query_error_is_value_error():
    with pytest.raises(ValueError):
        Query().limit(1001).values()