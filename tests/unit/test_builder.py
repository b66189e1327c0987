"""Tests for QueryBuilder end to end"""

import logging
import warnings

import pytest

from sqlstitch import (
    SKIP,
    InvalidSpecifier,
    InvalidValue,
    InvalidValueType,
    MalformedTemplate,
    MissingArgument,
    QueryBuilder,
    TemplateError,
    build_query,
)


class TestBuild:
    """Typical queries"""

    def test_plain_query_unchanged(self, builder):
        sql = "SELECT name FROM users WHERE user_id = 1"
        assert builder.build(sql) == sql

    def test_bare_string(self, builder):
        sql = builder.build("SELECT * FROM users WHERE name = ? AND block = 0", ["Jack"])
        assert sql == "SELECT * FROM users WHERE name = 'Jack' AND block = 0"

    def test_identifiers_and_ints(self, builder):
        sql = builder.build(
            "SELECT ?# FROM users WHERE user_id = ?d AND block = ?d",
            [["name", "email"], 2, True],
        )
        assert sql == "SELECT `name`, `email` FROM users WHERE user_id = 2 AND block = 1"

    def test_update_with_mapping(self, builder):
        sql = builder.build(
            "UPDATE users SET ?a WHERE user_id = -1",
            [{"name": "Jack", "email": None}],
        )
        assert sql == "UPDATE users SET `name` = 'Jack', `email` = NULL WHERE user_id = -1"

    def test_conditional_block_skipped(self, builder):
        sql = builder.build(
            "SELECT name FROM users WHERE ?# IN (?a){ AND block = ?d}",
            ["user_id", [1, 2, 3], builder.skip()],
        )
        assert sql == "SELECT name FROM users WHERE `user_id` IN (1, 2, 3)"

    def test_conditional_block_kept(self, builder):
        sql = builder.build(
            "SELECT name FROM users WHERE ?# IN (?a){ AND block = ?d}",
            ["user_id", [1, 2, 3], True],
        )
        assert sql == "SELECT name FROM users WHERE `user_id` IN (1, 2, 3) AND block = 1"

    def test_skipped_block_with_literal_text(self, builder):
        assert builder.build("SELECT * FROM t {WHERE id = ?}", [SKIP]) == "SELECT * FROM t "
        assert builder.build("SELECT * FROM t {WHERE id = ?}", [5]) == "SELECT * FROM t WHERE id = 5"

    def test_post_block_placeholder_gets_its_own_argument(self, builder):
        template = "SELECT * FROM t WHERE a = ?d{ AND b = ?d AND e = ?d} AND c = ?d"
        assert builder.build(template, [1, SKIP, 7, 3]) == "SELECT * FROM t WHERE a = 1 AND c = 3"
        assert builder.build(template, [1, 8, SKIP, 3]) == "SELECT * FROM t WHERE a = 1 AND c = 3"
        assert builder.build(template, [1, 2, 7, 3]) == (
            "SELECT * FROM t WHERE a = 1 AND b = 2 AND e = 7 AND c = 3"
        )

    def test_escaping_applied(self, builder):
        sql = builder.build("SELECT * FROM t WHERE name = ?", ["x' OR '1'='1"])
        assert sql == "SELECT * FROM t WHERE name = 'x\\' OR \\'1\\'=\\'1'"

    def test_build_is_idempotent_on_final_sql(self, builder):
        sql = builder.build("SELECT ?# FROM t WHERE id = ?d", ["name", 4])
        assert builder.build(sql) == sql
        assert builder.build(builder.build(sql)) == sql

    def test_args_may_be_tuple(self, builder):
        assert builder.build("SELECT ?d, ?f", (1, 2.5)) == "SELECT 1, 2.5"

    def test_no_state_between_calls(self, builder):
        template = "SELECT * FROM t{ WHERE id = ?d}"
        assert builder.build(template, [SKIP]) == "SELECT * FROM t"
        assert builder.build(template, [9]) == "SELECT * FROM t WHERE id = 9"
        assert builder.build(template, [SKIP]) == "SELECT * FROM t"


class TestBuildErrors:
    """Errors abort the build"""

    def test_nested_blocks(self, builder):
        with pytest.raises(MalformedTemplate):
            builder.build("SELECT {a = ? {b = ?}}", [1, 2])

    def test_invalid_specifier(self, builder):
        with pytest.raises(InvalidSpecifier):
            builder.build("SELECT * FROM t WHERE id = ?x", [1])

    def test_int_with_string(self, builder):
        with pytest.raises(InvalidValueType):
            builder.build("SELECT * FROM t WHERE id = ?d", ["1"])

    def test_not_enough_arguments(self, builder):
        with pytest.raises(MissingArgument):
            builder.build("SELECT ? , ?", [1])

    def test_all_errors_are_template_errors(self, builder):
        with pytest.raises(TemplateError):
            builder.build("SELECT }", [])
        with pytest.raises(ValueError):
            builder.build("SELECT ?a", [5])


class TestStraySkip:
    """skip() outside a conditional block"""

    def test_left_in_place_with_warning(self, builder):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            sql = builder.build("SELECT * FROM t WHERE a = ? AND b = ?d", [SKIP, 2])

        assert sql == "SELECT * FROM t WHERE a = ? AND b = 2"
        assert len(w) == 1
        assert issubclass(w[0].category, UserWarning)
        assert "outside any conditional block" in str(w[0].message)
        assert w[0].filename == __file__

    def test_warning_points_at_caller_of_build_query(self, escaper):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            build_query("SELECT ?", [SKIP], escaper=escaper)

        assert len(w) == 1
        assert w[0].filename == __file__

    def test_strict_raises(self, escaper):
        builder = QueryBuilder(escaper, strict_skip=True)
        with pytest.raises(InvalidValue, match="outside any conditional block"):
            builder.build("SELECT * FROM t WHERE a = ?", [SKIP])

    def test_strict_allows_skip_in_blocks(self, escaper):
        builder = QueryBuilder(escaper, strict_skip=True)
        assert builder.build("SELECT 1{ WHERE a = ?}", [SKIP]) == "SELECT 1"


class TestBuildQuery:
    """Module-level helper and logging"""

    def test_build_query(self, escaper):
        assert build_query("SELECT ?", ["a"], escaper=escaper) == "SELECT 'a'"

    def test_default_escaper_is_snowflake(self):
        assert build_query("SELECT ?", ["it's"]) == "SELECT 'it\\'s'"

    def test_logs_built_query(self, builder, caplog):
        with caplog.at_level(logging.DEBUG, logger="sqlstitch.builder"):
            builder.build("SELECT ?d", [1])
        assert "SELECT 1" in caplog.text
