"""Unit tests for the Session schema."""

import pytest
from pydantic import ValidationError

from ntc_booking.schemas import Session


class TestSession:
    def test_from_flat_login_response(self):
        session = Session.model_validate(
            {"name": "Ann", "email": "ann@example.com", "role": "Admin", "token": "abc", "_id": "1"}
        )
        assert session.token == "abc"
        assert session.role == "Admin"

    def test_nested_user_is_flattened(self):
        session = Session.model_validate(
            {"token": "abc", "user": {"name": "Ann", "email": "ann@example.com", "role": "Operator"}}
        )
        assert session.name == "Ann"
        assert session.role == "Operator"
        assert session.token == "abc"

    def test_token_required(self):
        with pytest.raises(ValidationError):
            Session.model_validate({"name": "Ann", "role": "Admin"})

    def test_empty_token_rejected(self):
        with pytest.raises(ValidationError):
            Session(token="")

    def test_non_ascii_token_rejected(self):
        with pytest.raises(ValidationError, match="token must be ASCII"):
            Session(token="t\u00f6k")

    @pytest.mark.parametrize(
        "role,expected",
        [("Admin", True), ("admin", False), ("ADMIN", False), ("Operator", False), (None, False)],
    )
    def test_is_admin_is_case_sensitive(self, role, expected):
        assert Session(role=role, token="t").is_admin is expected
