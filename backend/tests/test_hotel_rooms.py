"""Tests for hotel room endpoints."""
import pytest
from wedding.services.hotel_rooms import HotelRoomService


@pytest.fixture
def rooms(db):
    """Create three rooms of different sizes."""
    service = HotelRoomService(db)
    return [
        service.create_room("Single", 60.0, 1),
        service.create_room("Double", 90.5, 2),
        service.create_room("Family", 150.0, 4),
    ]


def test_list_rooms(client, rooms, auth_headers):
    response = client.get("/api/hotel-rooms", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert [r["id"] for r in data] == [r.id for r in rooms]
    assert data[1] == {"id": rooms[1].id, "description": "Double", "price": 90.5, "maxPersonCount": 2}


def test_reserve_room(client, rooms, auth_headers):
    response = client.post(f"/api/users/me/hotel-rooms/{rooms[1].id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["id"] == rooms[1].id

    reserved = client.get("/api/users/me/hotel-rooms", headers=auth_headers).json()
    assert [r["id"] for r in reserved] == [rooms[1].id]


def test_reserve_room_twice(client, rooms, auth_headers):
    client.post(f"/api/users/me/hotel-rooms/{rooms[1].id}", headers=auth_headers)

    response = client.post(f"/api/users/me/hotel-rooms/{rooms[1].id}", headers=auth_headers)

    assert response.status_code == 409


def test_reserve_room_too_small(client, rooms, auth_headers):
    """Party of two does not fit into a single room."""
    response = client.post(f"/api/users/me/hotel-rooms/{rooms[0].id}", headers=auth_headers)

    assert response.status_code == 400


def test_reserve_unknown_room(client, auth_headers):
    response = client.post("/api/users/me/hotel-rooms/999", headers=auth_headers)

    assert response.status_code == 404


def test_reservations_are_per_party(client, rooms, auth_headers, other_auth_headers):
    client.post(f"/api/users/me/hotel-rooms/{rooms[2].id}", headers=other_auth_headers)

    response = client.get("/api/users/me/hotel-rooms", headers=auth_headers)

    assert response.json() == []


def test_release_room(client, rooms, auth_headers):
    client.post(f"/api/users/me/hotel-rooms/{rooms[1].id}", headers=auth_headers)

    response = client.delete(f"/api/users/me/hotel-rooms/{rooms[1].id}", headers=auth_headers)

    assert response.status_code == 200
    assert client.get("/api/users/me/hotel-rooms", headers=auth_headers).json() == []


def test_release_room_not_reserved(client, rooms, auth_headers):
    response = client.delete(f"/api/users/me/hotel-rooms/{rooms[1].id}", headers=auth_headers)

    assert response.status_code == 404


def test_room_id_out_of_range(client, auth_headers):
    url = "/api/users/me/hotel-rooms/99999999999999999999"

    assert client.post(url, headers=auth_headers).status_code == 400
    assert client.delete(url, headers=auth_headers).status_code == 400
