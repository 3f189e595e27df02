"""
Tests for the domain error taxonomy.

No external dependencies or IO required.
"""

import pytest

from authapi.domain.auth.errors import email_taken, invalid_credentials
from authapi.domain.errors import (
    STATUS_BY_KIND,
    DomainError,
    ErrorKind,
    kind_for_status,
    status_for,
)


class TestErrorKind:
    """Tests for the closed set of kinds and their statuses."""

    def test_every_kind_has_a_status(self) -> None:
        assert set(STATUS_BY_KIND) == set(ErrorKind)

    @pytest.mark.parametrize(
        "kind, status",
        [
            (ErrorKind.BAD_REQUEST, 400),
            (ErrorKind.VALIDATION_ERROR, 400),
            (ErrorKind.UNAUTHORIZED, 401),
            (ErrorKind.FORBIDDEN, 403),
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.INTERNAL_SERVER_ERROR, 500),
        ],
    )
    def test_fixed_status(self, kind, status) -> None:
        assert DomainError(kind, "x").http_status == status

    def test_unknown_kind_falls_back_to_500(self) -> None:
        assert status_for("Teapot") == 500

    def test_kind_values_are_wire_names(self) -> None:
        assert ErrorKind.TOKEN_EXPIRED.value == "TokenExpired"
        assert ErrorKind.ACCESS_TOKEN_ERROR.value == "AccessTokenError"

    def test_kind_for_status(self) -> None:
        assert kind_for_status(401) is ErrorKind.UNAUTHORIZED
        assert kind_for_status(403) is ErrorKind.FORBIDDEN
        assert kind_for_status(404) is ErrorKind.NOT_FOUND
        assert kind_for_status(409) is ErrorKind.BAD_REQUEST
        assert kind_for_status(502) is ErrorKind.INTERNAL_SERVER_ERROR


class TestDomainError:
    """Tests for DomainError construction."""

    def test_kind_accepts_wire_name(self) -> None:
        assert DomainError("NotFound", "gone").kind is ErrorKind.NOT_FOUND

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValueError):
            DomainError("Teapot", "short and stout")

    def test_fields_are_read_only(self) -> None:
        error = DomainError.bad_request("nope")
        with pytest.raises(AttributeError):
            error.kind = ErrorKind.NOT_FOUND
        with pytest.raises(AttributeError):
            error.message = "changed"

    def test_validation_joins_messages_in_order(self) -> None:
        error = DomainError.validation(["first", "second", "third"])
        assert error.kind is ErrorKind.VALIDATION_ERROR
        assert error.message == "first, second, third"
        assert str(error) == "first, second, third"

    def test_auth_error_factories(self) -> None:
        assert email_taken().message == "Email already exists"
        assert invalid_credentials().message == "Invalid Credentials"
        assert invalid_credentials().http_status == 400
