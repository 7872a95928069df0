from __future__ import annotations

from convoso_client import models as M


def test_error_code_members_carry_text():
    assert M.ListsInsertError.NAME_REQUIRED == 6003
    assert M.ListsInsertError.NAME_REQUIRED.text == "The List requires a name"
    assert M.ListsInsertError(6081) is M.ListsInsertError.NAME_NOT_UNIQUE


def test_success_envelope_keeps_extra_fields():
    res = M.parse_result({"success": True, "code": 200, "data": {"id": 1}})
    assert isinstance(res, M.Success)
    assert res.data == {"id": 1}
    assert res.model_dump()["code"] == 200


def test_payload_without_success_flag_is_success():
    res = M.parse_result({"logged_out_users": []})
    assert isinstance(res, M.Success)
    assert res.data is None


def test_failure_resolves_endpoint_variant():
    res = M.parse_result({"success": False, "code": 6002, "text": "No such List"}, M.ListsSearchError)
    assert isinstance(res, M.Failure)
    assert res.error is M.ListsSearchError.NO_SUCH_LIST
    assert res.error.text == "No such List"


def test_failure_falls_back_to_forbidden_then_none():
    forbidden = M.parse_result({"success": False, "code": 403, "text": "Forbidden"}, M.LeadsDeleteError)
    assert forbidden.error is M.GlobalError.FORBIDDEN

    unknown = M.parse_result({"success": False, "code": 9999, "text": "?"}, M.LeadsDeleteError)
    assert unknown.error is None

    no_family = M.parse_result({"success": False, "code": 6001})
    assert no_family.error is None


def test_non_mapping_and_empty_payloads():
    assert M.parse_result(None) is None
    res = M.parse_result([1, 2])
    assert isinstance(res, M.Success)
    assert res.data == [1, 2]
