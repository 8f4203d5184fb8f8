import uuid

import pytest

from app.shared.exceptions import ValidationError
from app.shared.validators import generate_id, require_identifier, validate_uuid


def test_generated_ids_are_valid():
    assert validate_uuid(generate_id())


@pytest.mark.parametrize("value", [None, "", "abc", "507f1f77bcf86cd799439011", 42])
def test_validate_uuid_rejects(value):
    assert not validate_uuid(value)


def test_require_identifier_canonicalises():
    value = uuid.uuid4()

    assert require_identifier(str(value).upper(), "currentBookingId") == str(value)


def test_require_identifier_error_names_field():
    with pytest.raises(ValidationError) as exc_info:
        require_identifier("nope", "requestedDateId")

    assert exc_info.value.errors == [{"path": ["requestedDateId"], "message": "Invalid requestedDateId"}]
