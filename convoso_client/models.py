# convoso_client/models.py
from __future__ import annotations
from enum import Enum
from typing import Any, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr


class ErrorCode(int, Enum):
    """Closed set of documented ``(code, text)`` pairs for one endpoint."""

    def __new__(cls, code: int, text: str):
        member = int.__new__(cls, code)
        member._value_ = code
        member.text = text
        return member


class GlobalError(ErrorCode):
    FORBIDDEN = (403, "Forbidden")


# -------- Envelopes --------
class Success(BaseModel):
    model_config = ConfigDict(extra="allow")

    success: bool = True
    data: Any = None


class Failure(BaseModel):
    model_config = ConfigDict(extra="allow")

    success: bool = False
    code: Optional[int] = None
    text: str = ""

    _errors: Optional[Type[ErrorCode]] = PrivateAttr(default=None)

    @property
    def error(self) -> Optional[ErrorCode]:
        """The documented variant for this code, or None when undocumented."""
        if self.code is None:
            return None
        for family in (self._errors, GlobalError):
            if family is None:
                continue
            try:
                return family(self.code)
            except ValueError:
                continue
        return None


Result = Union[Success, Failure]


def parse_result(payload: Any, errors: Optional[Type[ErrorCode]] = None) -> Optional[Result]:
    if payload is None:
        return None
    if not isinstance(payload, dict):
        return Success(data=payload)
    if payload.get("success") is False:
        failure = Failure.model_validate(payload)
        failure._errors = errors
        return failure
    return Success.model_validate(payload)


# -------- Agents & users --------
class UsersRecordingsError(ErrorCode):
    MISSING_USERS = (6005, "Missing users")
    INVALID_OFFSET = (7231, "Invalid offset value")


class UsersSearchError(ErrorCode):
    MISSING_USERS = (6005, "Missing users")
    INVALID_OFFSET = (7231, "Invalid offset value")


# -------- Callbacks --------
class CallbackInsertError(ErrorCode):
    NO_SUCH_CALLBACK = (6038, "No such Callback")
    NO_SUCH_LEAD = (6001, "No such Lead")
    NO_SUCH_USER = (6006, "No such User")
    REQUIRED_FIELDS_MISSED = (6023, "Required fields are missed")
    INVALID_CALLBACK_TIME = (7237, "Invalid callback_time")


class CallbackUpdateError(ErrorCode):
    NO_SUCH_USER = (6006, "No such User")
    REQUIRED_FIELDS_MISSED = (6023, "Required fields are missed")
    NO_SUCH_CALLBACK = (6038, "No such Callback")
    INVALID_CALLBACK_TIME = (7237, "Invalid callback_time")


class CallbackDeleteError(ErrorCode):
    NO_SUCH_CALLBACK = (6038, "No such Callback")


class CallbackSearchError(ErrorCode):
    MISSING_CALLBACKS = (6000, "Missing callbacks")
    INVALID_OFFSET = (7231, "Invalid offset value")


# -------- Campaigns --------
class CampaignStatusError(ErrorCode):
    UNKNOWN_CAMPAIGN = (6004, "Unknown Campaign ID")
    MISSING_STATUS = (6010, "Missing status")


# -------- DNC --------
class DncInsertError(ErrorCode):
    INVALID_CAMPAIGN = (6006, "Invalid Campaign ID")
    INVALID_PHONE_NUMBER = (6007, "Invalid Phone Number")
    PHONE_NUMBER_EXISTS = (6008, "The phone number already exists")
    INVALID_COUNTRY_CODE = (6026, "Missing or Invalid Country Code")
    INVALID_PURPOSE = (6057, "Invalid Purpose Provided")
    INVALID_REASON = (6058, "Invalid Reason Provided")


class DncUpdateError(ErrorCode):
    UNKNOWN_CAMPAIGN = (6004, "Unknown Campaign ID")
    INVALID_PHONE_NUMBER = (6008, "The phone number is invalid")
    INVALID_COUNTRY_CODE = (6026, "Missing or Invalid Country Code")
    INVALID_ID = (6056, "Missing or Invalid value for ID")
    INVALID_PURPOSE = (6057, "Invalid Purpose Provided")
    INVALID_REASON = (6058, "Invalid Reason Provided")
    DUPLICATE_ENTRY = (
        6059,
        "This combination of Phone number, Campaign ID, and Phone Code already exists.",
    )


class DncDeleteError(ErrorCode):
    MISSING_PHONE_CODE = (6000, "Missing Phone Code")
    MISSING_CAMPAIGN = (6001, "Missing Campaign ID")
    MISSING_PHONE_NUMBER = (6002, "Missing Phone Number")
    PHONE_NUMBER_NOT_FOUND = (6003, "Phone Number Not Found")
    INVALID_LEAD_STATUS = (6004, "Invalid Lead status")
    MISSING_LEAD_STATUS = (6005, "Missing Lead status")


class DncSearchError(ErrorCode):
    INVALID_CAMPAIGN = (6006, "Invalid Campaign ID")
    INVALID_OFFSET = (7231, "Invalid offset value")
    PHONE_NUMBER_EXISTS = (6008, "The phone number already exists")
    INVALID_COUNTRY_CODE = (6026, "Missing or Invalid Country Code")
    INVALID_PURPOSE = (6057, "Invalid Purpose Provided")
    INVALID_REASON = (6058, "Invalid Reason Provided")


# -------- Leads --------
class LeadsInsertError(ErrorCode):
    NO_SUCH_LIST = (6002, "No such List")
    NO_SUCH_USER = (6006, "No such User")
    PHONE_AND_LIST_REQUIRED = (6007, "The Lead requires a phone number and list id")
    INVALID_PHONE_NUMBER = (6008, "The phone number is invalid")
    PHONE_NUMBER_EXISTS = (6009, "The phone number already exists")
    REQUIRED_FIELDS_MISSED = (6023, "Required fields are missed")
    INVALID_EMAIL = (6079, "Invalid Email(s)")


class LeadsUpdateError(ErrorCode):
    NO_SUCH_LEAD = (6001, "No such Lead")
    NO_SUCH_LIST = (6002, "No such List")
    NO_SUCH_USER = (6006, "No such User")
    INVALID_PHONE_NUMBER = (6008, "The phone number is invalid")
    INVALID_EMAIL = (6079, "Invalid Email(s)")


class LeadsDeleteError(ErrorCode):
    NO_SUCH_LEAD = (6001, "No such Lead")


class LeadsSearchError(ErrorCode):
    MISSING_LISTS = (6000, "Missing lists")
    INVALID_LIMIT = (7230, "Invalid limit value")
    INVALID_OFFSET = (7231, "Invalid offset value")


class LeadRecordingsError(ErrorCode):
    MISSING_USERS = (6005, "Missing users")
    INVALID_OFFSET = (7231, "Invalid offset value")


# -------- Lists --------
class ListsInsertError(ErrorCode):
    NAME_REQUIRED = (6003, "The List requires a name")
    UNKNOWN_CAMPAIGN = (6004, "Unknown Campaign ID")
    NAME_TOO_SHORT = (6046, "The List name should be at least 10 characters long")
    NAME_NOT_UNIQUE = (6081, "The list name should be unique")


class ListsUpdateError(ErrorCode):
    NO_SUCH_LIST = (6002, "No such List")
    UNKNOWN_CAMPAIGN = (6004, "Unknown Campaign ID")
    NAME_TOO_SHORT = (6046, "The List name should be at least 10 characters long")
    NAME_NOT_UNIQUE = (6081, "The list name should be unique")


class ListsDeleteError(ErrorCode):
    NO_SUCH_LIST = (6002, "No such List")
    DELETION_IN_PROGRESS = (102, "List deletion in progress")


class ListsSearchError(ErrorCode):
    NO_SUCH_LIST = (6002, "No such List")


# -------- Revenue --------
class RevenueUpdateError(ErrorCode):
    MISSING_CALL_LOG = (6032, "Missing Call Log ID")
    NO_SUCH_CALL_LOG = (6033, "No such Call Log")
    REVENUE_OR_RETURN_REQUIRED = (6036, "Either Revenue or Return need to have value")


# -------- SMS opt-out --------
class SmsOptOutInsertError(ErrorCode):
    INVALID_CAMPAIGN = (6006, "Invalid Campaign ID")
    INVALID_PHONE_NUMBER = (6007, "Invalid Phone Number")
    PHONE_NUMBER_EXISTS = (6008, "The phone number already exists")
    INVALID_COUNTRY_CODE = (6026, "Missing or Invalid Country Code")
    INVALID_PURPOSE = (6057, "Invalid Purpose Provided")
    INVALID_REASON = (6058, "Invalid Reason Provided")


class SmsOptOutUpdateError(ErrorCode):
    UNKNOWN_CAMPAIGN = (6004, "Unknown Campaign ID")
    INVALID_PHONE_NUMBER = (6008, "The phone number is invalid")
    INVALID_COUNTRY_CODE = (6026, "Missing or Invalid Country Code")
    INVALID_ID = (6056, "Missing or Invalid value for ID")
    INVALID_PURPOSE = (6057, "Invalid Purpose Provided")
    INVALID_REASON = (6058, "Invalid Reason Provided")
    DUPLICATE_ENTRY = (
        6059,
        "This combination of Phone number, Campaign ID, and Phone Code already exists.",
    )
    MISSING_REQUIRED_FIELD = (
        4001,
        "Missing required field: phone_number / phone_code / campaign_id.",
    )
    NON_NUMERIC_FIELD = (4002, "phone_number / phone_code / campaign_id must be numeric.")


class SmsOptOutSearchError(ErrorCode):
    INVALID_CAMPAIGN = (6006, "Invalid Campaign ID")
    INVALID_OFFSET = (7231, "Invalid offset value")
    PHONE_NUMBER_EXISTS = (6008, "The phone number already exists")
    INVALID_COUNTRY_CODE = (6026, "Missing or Invalid Country Code")
    INVALID_PURPOSE = (6057, "Invalid Purpose Provided")
    INVALID_REASON = (6058, "Invalid Reason Provided")


# -------- Statuses --------
_YES_NO = "Must be Y for Yes or N for No."
_NOT_EMPTY = "can not be set to a empty value, please assign a Y for Yes or N for No or dont set parameter."
_BAD_HEX = "HEX color defined is invalid, do not include #, valid example: 6711d1."


class StatusesInsertError(ErrorCode):
    MISSING_DESCRIPTION = (6060, "Missing Status Description")
    INVALID_ABBREVIATION = (
        6061,
        "Missing or Invalid Status Abbreviation, only Alphanumeric characters allowed. "
        "Must be between 2-6 characters long.",
    )
    INVALID_FINAL = (6062, f"Missing or Invalid Final option, {_YES_NO}")
    INVALID_REACHED = (6063, f"Missing or Invalid Reached option, {_YES_NO}")
    INVALID_SUCCESS = (6064, f"Missing or Invalid Success option, {_YES_NO}")
    INVALID_DNC = (6065, f"Missing or Invalid DNC option, {_YES_NO}")
    INVALID_CALLBACK = (6066, f"Missing or Invalid Callback option, {_YES_NO}")
    INVALID_CONTACT = (6067, f"Missing or Invalid Contact option, {_YES_NO}")
    INVALID_VOICEMAIL = (6068, f"Missing or Invalid Voicemail option, {_YES_NO}")
    INVALID_HEX_COLOR = (6078, _BAD_HEX)


class StatusesUpdateError(ErrorCode):
    INVALID_ABBREVIATION = (
        6069,
        "Missing or Invalid Status Abbreviation, Only custom statuses can be modified.",
    )
    EMPTY_FINAL = (6071, f"Final option {_NOT_EMPTY}")
    EMPTY_REACHED = (6072, f"Reached option {_NOT_EMPTY}")
    EMPTY_SUCCESS = (6073, f"Success option {_NOT_EMPTY}")
    EMPTY_DNC = (6074, f"DNC option {_NOT_EMPTY}")
    EMPTY_CALLBACK = (6075, f"Callback option {_NOT_EMPTY}")
    EMPTY_CONTACT = (6076, f"Contact option {_NOT_EMPTY}")
    EMPTY_VOICEMAIL = (6077, f"Voicemail option {_NOT_EMPTY}")
    INVALID_HEX_COLOR = (6078, _BAD_HEX)
