import pytest

from app.models.enums import UserRole
from app.schemas.address import AddressDTO
from app.schemas.user import UserRequest

FIELDS = ("id", "first_name", "last_name", "email", "phone", "role", "address")

SAMPLE_VALUES = {
    "id": "u-1",
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@example.com",
    "phone": "555-0100",
    "role": UserRole.ADMIN,
    "address": AddressDTO(street="12 St James's Sq", city="London", country="UK"),
}


def test_new_request_has_every_field_unset():
    request = UserRequest()
    for field in FIELDS:
        assert getattr(request, field) is None


@pytest.mark.parametrize("field", FIELDS)
def test_set_then_get_returns_value(field):
    request = UserRequest()
    setattr(request, field, SAMPLE_VALUES[field])
    assert getattr(request, field) == SAMPLE_VALUES[field]


@pytest.mark.parametrize("field", FIELDS)
def test_setting_one_field_leaves_others_alone(field):
    request = UserRequest(**SAMPLE_VALUES)
    setattr(request, field, None)
    for other in FIELDS:
        if other != field:
            assert getattr(request, other) == SAMPLE_VALUES[other]


def test_assignment_accepts_any_value():
    request = UserRequest()
    request.email = "not an email"
    request.phone = ""
    request.role = None
    assert request.email == "not an email"
    assert request.phone == ""


def test_equality_is_structural():
    assert UserRequest(**SAMPLE_VALUES) == UserRequest(**SAMPLE_VALUES)
    assert UserRequest() == UserRequest()


@pytest.mark.parametrize("field", FIELDS)
def test_one_differing_field_breaks_equality(field):
    changed = UserRequest(**SAMPLE_VALUES)
    setattr(changed, field, None)
    assert changed != UserRequest(**SAMPLE_VALUES)


def test_ada_scenario():
    request = UserRequest()
    request.first_name = "Ada"
    request.last_name = "Lovelace"
    request.email = "ada@example.com"
    request.phone = "555-0100"

    assert request.first_name == "Ada"
    assert request.last_name == "Lovelace"
    assert request.email == "ada@example.com"
    assert request.phone == "555-0100"
    assert request.role is None
    assert request.address is None
    assert "Lovelace" in repr(request)


def test_parses_camel_case_body():
    request = UserRequest.model_validate(
        {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "role": "ADMIN",
            "address": {"city": "London", "zipcode": "SW1Y"},
            "unknown": "dropped",
        }
    )
    assert request.first_name == "Ada"
    assert request.role is UserRole.ADMIN
    assert request.address == AddressDTO(city="London", zipcode="SW1Y")
    assert request.model_dump(by_alias=True, exclude_none=True) == {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "role": UserRole.ADMIN,
        "address": {"city": "London", "zipcode": "SW1Y"},
    }


def test_fields_set_tracks_constructed_and_assigned_fields():
    request = UserRequest(first_name="Ada")
    request.address = None
    assert request.model_fields_set == {"first_name", "address"}
