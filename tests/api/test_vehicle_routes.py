"""Vehicle Routes — list and detail request/response contract.

Invariants:
    - Invalid input → 400 VALIDATION_ERROR and the store is never called
    - List: totalPages == ceil(total / pageSize), len(vehicles) <= pageSize, meta mirrors data
    - Detail: missing vehicle → 404 NOT_FOUND, never an empty success
    - Store signals: list → 400 BUSINESS_RULE_ERROR, detail → 404 NOT_FOUND
"""

import math

import pytest

from tests.fake_gateway import image_row, vehicle_detail_row, vehicle_list_row


# ─── GET /external/vehicle ──────────────────────────────────────

async def test_list_scenario_five_matches(client, gateway):
    gateway.respond(
        "spVehicleList",
        [vehicle_list_row(i, year=2021) for i in range(1, 6)],
        [{"total": 5}],
    )

    res = await client.get(
        "/external/vehicle",
        params={"yearMin": 2020, "priceMax": 50000, "page": 1, "pageSize": 20},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["data"]["total"] == 5
    assert body["data"]["totalPages"] == 1
    assert len(body["data"]["vehicles"]) == 5
    assert body["meta"] == {"page": 1, "pageSize": 20, "total": 5}
    params = gateway.calls[0]["params"]
    assert params["yearMin"] == 2020
    assert params["priceMax"] == 50000
    assert params["sortBy"] == "dateCreated"
    assert params["sortOrder"] == "DESC"


@pytest.mark.parametrize("total,page_size", [(0, 20), (1, 1), (41, 20), (100, 100), (7, 3)])
async def test_list_total_pages_property(client, gateway, total, page_size):
    rows = [vehicle_list_row(i) for i in range(1, min(total, page_size) + 1)]
    gateway.respond("spVehicleList", rows, [{"total": total}])

    res = await client.get("/external/vehicle", params={"pageSize": page_size})

    data = res.json()["data"]
    assert data["totalPages"] == math.ceil(total / page_size)
    assert len(data["vehicles"]) <= data["pageSize"]


async def test_list_vehicle_row_is_projected(client, gateway):
    gateway.respond("spVehicleList", [vehicle_list_row(3)], [{"total": 1}])

    res = await client.get("/external/vehicle")

    vehicle = res.json()["data"]["vehicles"][0]
    assert vehicle["idVehicle"] == 3
    assert vehicle["price"] == 45990.0
    assert vehicle["brandName"] == "Toyota"
    assert vehicle["primaryImageUrl"].endswith("/3/main.jpg")


@pytest.mark.parametrize("value", ["1", "true"])
async def test_featured_only_truthy_forms(client, gateway, value):
    gateway.respond("spVehicleList", [], [{"total": 0}])

    await client.get("/external/vehicle", params={"featuredOnly": value})

    assert gateway.calls[0]["params"]["featuredOnly"] == 1


async def test_featured_only_false_string_is_falsy_not_error(client, gateway):
    gateway.respond("spVehicleList", [], [{"total": 0}])

    res = await client.get("/external/vehicle", params={"featuredOnly": "false"})

    assert res.status_code == 200
    assert gateway.calls[0]["params"]["featuredOnly"] == 0


async def test_unsupported_sort_field_rejected_before_store(client, gateway):
    res = await client.get("/external/vehicle", params={"sortBy": "color"})

    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["code"] == "VALIDATION_ERROR"
    assert body["error"] == "Validation failed"
    assert body["details"][0]["field"] == "sortBy"
    assert gateway.calls == []


@pytest.mark.parametrize("params", [
    {"pageSize": "101"},
    {"page": "0"},
    {"yearMin": "1800"},
    {"priceMin": "-5"},
    {"idBrand": "x"},
])
async def test_list_out_of_range_rejected(client, gateway, params):
    res = await client.get("/external/vehicle", params=params)

    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"
    assert gateway.calls == []


async def test_list_store_signal_is_business_rule_error(client, gateway):
    gateway.signal("spVehicleList", "yearRangeInvalid")

    res = await client.get("/external/vehicle", params={"yearMin": 2022, "yearMax": 2020})

    assert res.status_code == 400
    assert res.json() == {
        "success": False, "error": "yearRangeInvalid", "code": "BUSINESS_RULE_ERROR",
    }


# ─── GET /external/vehicle/{id} ─────────────────────────────────

async def test_detail_returns_vehicle_and_images(client, gateway):
    gateway.respond(
        "spVehicleGet",
        [vehicle_detail_row(12)],
        [image_row(1, 12, is_primary=True), image_row(2, 12, order=1)],
    )

    res = await client.get("/external/vehicle/12")

    assert res.status_code == 200
    body = res.json()
    assert "meta" not in body
    assert body["data"]["vehicle"]["idVehicle"] == 12
    assert body["data"]["vehicle"]["brandCode"] == "TOY"
    assert body["data"]["vehicle"]["dateCreated"].startswith("2024-03-01T12:00:00")
    assert len(body["data"]["images"]) == 2
    assert gateway.calls[0]["params"] == {"idVehicle": 12}


async def test_detail_nonexistent_vehicle_is_404(client, gateway):
    gateway.respond("spVehicleGet", [], [])

    res = await client.get("/external/vehicle/999999")

    assert res.status_code == 404
    body = res.json()
    assert body["success"] is False
    assert body["code"] == "NOT_FOUND"
    assert "data" not in body


async def test_detail_store_signal_is_404(client, gateway):
    gateway.signal("spVehicleGet", "vehicleNotFound")

    res = await client.get("/external/vehicle/4")

    assert res.status_code == 404
    assert res.json()["code"] == "NOT_FOUND"


@pytest.mark.parametrize("raw", ["abc", "0", "-1", "2.5"])
async def test_detail_invalid_id(client, gateway, raw):
    res = await client.get(f"/external/vehicle/{raw}")

    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["error"] == "Invalid vehicle ID"
    assert body["details"][0]["field"] == "id"
    assert gateway.calls == []
