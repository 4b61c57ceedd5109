import json

from apptemplate.dto import GetMainResponse
from apptemplate.responses import json_response


def test_envelope_with_none_data():
    response = json_response(500, "boom", None)
    assert response.status_code == 500
    assert json.loads(response.get_data(as_text=True)) == {"message": "boom", "data": None}


def test_content_type_is_json():
    response = json_response(200, "ok", [])
    assert response.content_type == "application/json; charset=utf-8"


def test_dto_items_are_serialised():
    response = json_response(200, "HALO", [GetMainResponse(id=1, name="a")])
    assert json.loads(response.get_data(as_text=True)) == {
        "message": "HALO",
        "data": [{"id": 1, "name": "a"}],
    }


def test_plain_values_pass_through():
    payload = {"nested": [1, "two", {"three": 3}]}
    response = json_response(201, "created", payload)
    assert response.status_code == 201
    assert json.loads(response.get_data(as_text=True))["data"] == payload