"""Unit tests for QueryChain: chaining, rendering and execution."""

from __future__ import annotations

import logging

import pytest

from chainql import QueryChain, QueryConfig
from chainql.errors import CoercionError, ConnectionNotBoundError
from chainql.execute.adapter import ExecutionAdapter
from chainql.schema.conditions import Equality, Raw
from tests.fixtures import FakeConnection, LazyConnection, UserModel


def _q() -> QueryChain:
    return UserModel().new_query()


def test_new_query_is_bound_to_model_table():
    query = _q()
    assert isinstance(query, QueryChain)
    assert query.table_name == "users"


def test_no_clauses_renders_table_star():
    assert _q().to_sql() == "SELECT users.* FROM users;"


def test_full_scenario_exact_text():
    sql = (
        _q()
        .select("users.*", "orders.amount")
        .join("orders", "users.id = orders.user_id")
        .where({"users.name": "Mike"})
        .order_by("orders.amount", "DESC")
        .limit(10)
        .to_sql()
    )
    assert sql == (
        "SELECT users.*, orders.amount FROM users "
        "INNER JOIN orders ON users.id = orders.user_id "
        "WHERE users.name = 'Mike' ORDER BY orders.amount DESC LIMIT 10;"
    )


# ---------------------------------------------------------------------------
# Chaining identity
# ---------------------------------------------------------------------------


def test_every_setter_returns_the_same_chain():
    query = _q()
    assert query.select("*") is query
    assert query.join("orders", "users.id = orders.user_id") is query
    assert query.left_join("products", "orders.product_id = products.id") is query
    assert query.right_join("categories", "products.category_id = categories.id") is query
    assert query.where({"userName": "Mike"}) is query
    assert query.where_raw("age > 18") is query
    assert query.group_by("users.id") is query
    assert query.order_by("age", "DESC") is query
    assert query.limit(10) is query
    assert query.offset(20) is query


# ---------------------------------------------------------------------------
# SELECT
# ---------------------------------------------------------------------------


def test_select_specific_fields():
    sql = _q().select("userName", "age").to_sql()
    assert sql.startswith("SELECT userName, age FROM users")


def test_select_accumulates():
    assert _q().select("a").select("b").to_sql() == "SELECT a, b FROM users;"


def test_select_keeps_aliases():
    sql = _q().select("users.id as user_id", "orders.id as order_id").to_sql()
    assert "users.id as user_id, orders.id as order_id" in sql


# ---------------------------------------------------------------------------
# JOIN
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("method", "keyword"),
    [("join", "INNER JOIN"), ("left_join", "LEFT JOIN"), ("right_join", "RIGHT JOIN")],
)
def test_join_kinds(method, keyword):
    query = getattr(_q(), method)("orders", "users.id = orders.user_id")
    assert f"{keyword} orders ON users.id = orders.user_id" in query.to_sql()


def test_mixed_joins_in_call_order():
    sql = (
        _q()
        .join("orders", "users.id = orders.user_id")
        .left_join("products", "orders.product_id = products.id")
        .to_sql()
    )
    assert sql == (
        "SELECT users.* FROM users "
        "INNER JOIN orders ON users.id = orders.user_id "
        "LEFT JOIN products ON orders.product_id = products.id;"
    )


# ---------------------------------------------------------------------------
# WHERE
# ---------------------------------------------------------------------------


def test_where_mapping_quotes_text():
    assert "WHERE userName = 'Mike'" in _q().where({"userName": "Mike"}).to_sql()


def test_where_mapping_numbers_unquoted():
    sql = _q().where({"age": 25}).to_sql()
    assert "age = 25" in sql
    assert "age = '25'" not in sql


def test_where_mapping_multiple_keys_anded_in_order():
    sql = _q().where({"userName": "Mike", "sex": "男"}).to_sql()
    assert sql.endswith("WHERE userName = 'Mike' AND sex = '男';")


def test_one_call_with_two_keys_equals_two_calls():
    one = _q().where({"a": 1, "b": "x"}).to_sql()
    two = _q().where({"a": 1}).where({"b": "x"}).to_sql()
    assert one == two


def test_where_string_is_raw():
    assert _q().where("age > 18").to_sql() == "SELECT users.* FROM users WHERE age > 18;"


def test_where_qualified_field():
    assert "users.userName = 'Mike'" in _q().where({"users.userName": "Mike"}).to_sql()


def test_where_empty_mapping_adds_nothing():
    query = _q().where({})
    assert query.state.filters == []
    assert "WHERE" not in query.to_sql()


def test_where_raw_verbatim():
    sql = _q().where_raw("amount > 100 AND status = 'active'").to_sql()
    assert "WHERE amount > 100 AND status = 'active'" in sql


def test_where_and_where_raw_keep_call_order():
    sql = _q().where({"sex": "男"}).where_raw("age > 25").where({"active": True}).to_sql()
    assert sql.endswith("WHERE sex = '男' AND age > 25 AND active = TRUE;")


def test_where_accepts_condition_variants():
    sql = _q().where([Equality(field="age", value=30), Raw(text="name LIKE 'J%'")]).to_sql()
    assert sql.endswith("WHERE age = 30 AND name LIKE 'J%';")


def test_where_empty_string_value():
    assert "userName = ''" in _q().where({"userName": ""}).to_sql()


def test_where_escapes_quotes_by_default():
    assert "'Mike O''Brien'" in _q().where({"userName": "Mike O'Brien"}).to_sql()


def test_where_legacy_quoting():
    query = QueryChain("users", config=QueryConfig(escape_quotes=False))
    assert "'Mike O'Brien'" in query.where({"userName": "Mike O'Brien"}).to_sql()


def test_where_unsupported_value_fails_at_call_time():
    query = _q()
    with pytest.raises(CoercionError):
        query.where({"deleted_at": None})
    assert query.to_sql() == "SELECT users.* FROM users;"


def test_where_non_finite_number_fails_at_call_time():
    query = _q()
    with pytest.raises(CoercionError):
        query.where({"score": float("nan")})
    assert query.to_sql() == "SELECT users.* FROM users;"


# ---------------------------------------------------------------------------
# ORDER BY / GROUP BY / LIMIT / OFFSET
# ---------------------------------------------------------------------------


def test_order_by_defaults_to_asc():
    assert _q().order_by("age").to_sql().endswith("ORDER BY age ASC;")


def test_order_by_multiple_keys():
    sql = _q().order_by("sex", "ASC").order_by("age", "DESC").to_sql()
    assert "ORDER BY sex ASC, age DESC" in sql


def test_order_by_direction_case_insensitive():
    assert "ORDER BY age DESC" in _q().order_by("age", "desc").to_sql()


def test_order_by_rejects_unknown_direction():
    with pytest.raises(ValueError):
        _q().order_by("age", "SIDEWAYS")


def test_group_by_between_where_and_order_by():
    sql = (
        _q()
        .select("users.id", "COUNT(orders.id) as orderCount")
        .left_join("orders", "users.id = orders.user_id")
        .where({"users.age": 29})
        .group_by("users.id")
        .order_by("orderCount", "DESC")
        .to_sql()
    )
    assert sql.index("WHERE") < sql.index("GROUP BY users.id") < sql.index("ORDER BY")


def test_limit_and_offset_paging():
    page, page_size = 3, 10
    sql = _q().order_by("id").limit(page_size).offset((page - 1) * page_size).to_sql()
    assert sql.endswith("ORDER BY id ASC LIMIT 10 OFFSET 20;")


def test_limit_last_write_wins():
    assert _q().limit(5).limit(7).to_sql().endswith("LIMIT 7;")


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        _q().limit(-1)


def test_negative_offset_rejected():
    with pytest.raises(ValueError):
        _q().offset(-5)


# ---------------------------------------------------------------------------
# Rendering is pure
# ---------------------------------------------------------------------------


def test_build_query_is_idempotent():
    query = _q().select("a").where({"b": 1}).limit(3)
    assert query.build_query() == query.to_sql() == str(query)
    assert query.to_sql() == query.to_sql()


def test_state_is_a_copy():
    query = _q().select("a")
    query.state.projection.append("b")
    assert query.to_sql() == "SELECT a FROM users;"


def test_table_name_is_read_only():
    query = _q()
    with pytest.raises(AttributeError):
        query.table_name = "orders"


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


def test_execute_sends_rendered_sql_and_returns_rows():
    conn = FakeConnection(rows=[{"id": 1, "name": "Mike"}])
    rows = UserModel(conn).new_query().where({"name": "Mike"}).execute()
    assert rows == [{"id": 1, "name": "Mike"}]
    assert conn.queries == ["SELECT users.* FROM users WHERE name = 'Mike';"]


def test_execute_rethrows_original_error_and_logs(caplog):
    error = RuntimeError("database is locked")
    conn = FakeConnection(error=error)
    query = UserModel(conn).new_query().where_raw("age > 18")

    with caplog.at_level(logging.ERROR, logger="chainql.execute.adapter"):
        with pytest.raises(RuntimeError) as excinfo:
            query.execute()

    assert excinfo.value is error
    assert "database is locked" in caplog.text
    assert "SELECT users.* FROM users WHERE age > 18;" in caplog.text


def test_first_returns_first_row_and_forces_limit_one():
    conn = FakeConnection(rows=[{"id": 1}, {"id": 2}])
    row = UserModel(conn).new_query().limit(50).first()
    assert row == {"id": 1}
    assert conn.queries == ["SELECT users.* FROM users LIMIT 1;"]


def test_first_returns_none_for_no_rows():
    conn = FakeConnection(rows=[])
    assert UserModel(conn).new_query().first() is None


def test_execute_and_first_with_lazy_rows():
    conn = LazyConnection(rows=[{"id": 1}, {"id": 2}])
    chain = QueryChain("users", adapter=ExecutionAdapter(conn))
    assert list(chain.execute()) == [{"id": 1}, {"id": 2}]
    assert chain.first() == {"id": 1}
    assert UserModel(LazyConnection(rows=[])).new_query().first() is None


def test_execute_without_connection_raises():
    with pytest.raises(ConnectionNotBoundError) as excinfo:
        _q().where({"id": 1}).execute()
    assert excinfo.value.sql == "SELECT users.* FROM users WHERE id = 1;"


def test_standalone_chain_with_adapter():
    conn = FakeConnection(rows=[{"n": 3}])
    query = QueryChain("orders", adapter=ExecutionAdapter(conn)).select("COUNT(*) as n")
    assert query.execute() == [{"n": 3}]
    assert conn.queries == ["SELECT COUNT(*) as n FROM orders;"]
