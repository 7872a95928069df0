from __future__ import annotations

from convoso_client.params import (
    PaginationPolicy,
    apply_pagination_policy,
    clamp_limit,
    clamp_offset,
    normalize_hex_color,
    normalize_params,
)


def test_lists_are_joined_with_commas():
    assert normalize_params({"campaign_id": [102, 104, 106]}) == {"campaign_id": "102,104,106"}
    assert normalize_params({"statuses": ("active", "paused")}) == {"statuses": "active,paused"}
    assert normalize_params({"campaign_id": [102]}) == {"campaign_id": "102"}


def test_empty_list_becomes_empty_string():
    assert normalize_params({"campaign_id": []}) == {"campaign_id": ""}


def test_mixed_sequence_is_stringified_element_wise():
    assert normalize_params({"mixed": [1, "a", True, 2.5]}) == {"mixed": "1,a,true,2.5"}


def test_whole_floats_drop_trailing_zero():
    assert normalize_params({"ids": [1.0, 2.5, 3]}) == {"ids": "1,2.5,3"}


def test_scalars_and_none_pass_through():
    raw = {"email": "a@b.c", "offset": 0, "limit": 1000, "active": True, "deleted": False, "opt": None}
    assert normalize_params(raw) == raw


def test_unsupported_values_are_dropped():
    out = normalize_params({"nested": {"foo": "bar"}, "tags": {"x"}, "obj": object(), "valid": "test"})
    assert out == {"valid": "test"}


def test_normalizing_twice_is_a_no_op():
    once = normalize_params({"campaign_id": [1, 2], "user_id": 7, "opt": None})
    assert normalize_params(once) == once


def test_clamp_offset():
    assert clamp_offset(None) == 0
    assert clamp_offset(-5) == 0
    assert clamp_offset(100) == 100
    assert clamp_offset(50001) == 50000
    assert clamp_offset(200000, 100000) == 100000
    for value in (-1000, -1, 0, 1, 49999, 50000, 10**9):
        assert 0 <= clamp_offset(value) <= 50000


def test_clamp_limit():
    assert clamp_limit(None) == 1000
    assert clamp_limit(None, 5000, 20) == 20
    assert clamp_limit(0) == 1
    assert clamp_limit(-3) == 1
    assert clamp_limit(100) == 100
    assert clamp_limit(1001) == 1000
    for value in (-10, 0, 1, 999, 1000, 10**6):
        assert 1 <= clamp_limit(value) <= 1000


def test_pagination_policy_defaults():
    out = apply_pagination_policy({"offset": -10, "limit": 5000, "other": "value"})
    assert out == {"offset": 0, "limit": 1000, "other": "value"}


def test_pagination_policy_per_endpoint_bounds():
    policy = PaginationPolicy(offset_max=100000, limit_max=5000, limit_default=20)
    out = apply_pagination_policy({"offset": 90000, "limit": 9000}, policy)
    assert out == {"offset": 90000, "limit": 5000}


def test_pagination_policy_leaves_non_numeric_values_alone():
    out = apply_pagination_policy({"offset": "abc", "limit": "50", "flag": True})
    assert out == {"offset": "abc", "limit": "50", "flag": True}
    # bool is not treated as a number
    assert apply_pagination_policy({"limit": False}) == {"limit": False}


def test_pagination_policy_copies_input():
    raw = {"offset": -1}
    apply_pagination_policy(raw)
    assert raw == {"offset": -1}
    assert apply_pagination_policy(None) == {}


def test_normalize_hex_color():
    assert normalize_hex_color("#6711d1") == "6711d1"
    assert normalize_hex_color("6711d1") == "6711d1"
    assert normalize_hex_color(None) is None
    assert normalize_hex_color("") is None
