"""
Tests for the partial-update compiler.
"""

import pytest

from ourimpact.core.exceptions import BadRequestError
from ourimpact.crud.comment import COMMENT_UPDATE_FIELDS
from ourimpact.crud.user import USER_UPDATE_FIELDS
from ourimpact.utils.sql import sql_for_partial_update


def test_compiles_assignments_in_input_order():
    """Each field maps to its column with a numbered placeholder."""
    result = sql_for_partial_update(
        {"firstName": "Aliya", "userCity": "Paris"},
        USER_UPDATE_FIELDS,
    )

    assert result.columns == ["first_name", "city_name"]
    assert result.set_cols == ['"first_name"=:p1', '"city_name"=:p2']
    assert result.values == ["Aliya", "Paris"]
    assert result.set_clause == '"first_name"=:p1, "city_name"=:p2'


@pytest.mark.parametrize(
    "data",
    [
        {"commentText": "hello"},
        {"firstName": "A", "lastName": "B"},
        {"firstName": "A", "lastName": "B", "email": "a@b.com", "userCity": "Dallas", "password": "x"},
    ],
)
def test_one_assignment_per_field(data):
    mapping = {**USER_UPDATE_FIELDS, **COMMENT_UPDATE_FIELDS}
    result = sql_for_partial_update(data, mapping)

    assert len(result.set_cols) == len(data)
    assert len(result.values) == len(data)
    for idx, (key, value) in enumerate(data.items()):
        assert result.set_cols[idx] == f'"{mapping[key]}"=:p{idx + 1}'
        assert result.values[idx] == value


def test_params_and_values_views():
    result = sql_for_partial_update({"commentText": "updated"}, COMMENT_UPDATE_FIELDS)

    assert result.params() == {"p1": "updated"}
    assert result.as_values() == {"comment_text": "updated"}


def test_empty_data_is_rejected():
    with pytest.raises(BadRequestError) as exc_info:
        sql_for_partial_update({}, COMMENT_UPDATE_FIELDS)

    assert exc_info.value.message == "No data"
    assert exc_info.value.status_code == 400


def test_unknown_field_is_rejected():
    """Fields outside the allow-list are refused rather than used as column names."""
    with pytest.raises(BadRequestError) as exc_info:
        sql_for_partial_update({"commentText": "ok", "isAdmin": True}, COMMENT_UPDATE_FIELDS)

    assert "isAdmin" in exc_info.value.message


def test_falsy_values_are_kept():
    result = sql_for_partial_update({"firstName": ""}, USER_UPDATE_FIELDS)

    assert result.values == [""]
