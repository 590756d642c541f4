from datetime import date, time
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from covoit.api.deps import get_current_profile, get_database, get_ride_store
from covoit.main import create_app
from covoit.models.domain import Profile, ReservationStatus, RideOffer
from covoit.services.booking import InMemoryRideStore


class DummyQuery:
    def __init__(self, table: "DummyTable") -> None:
        self.table = table

    def eq(self, column: str, value) -> "DummyQuery":
        return self

    def limit(self, count: int) -> "DummyQuery":
        return self

    def order(self, column: str, desc: bool = False) -> "DummyQuery":
        return self

    def execute(self):
        if self.table.error is not None:
            raise self.table.error
        return SimpleNamespace(data=self.table.returned)


class DummyTable:
    def __init__(self) -> None:
        self.inserted: list[dict] = []
        self.returned: list[dict] = []
        self.error: Exception | None = None

    def insert(self, row: dict) -> DummyQuery:
        self.inserted.append(row)
        self.returned = [{"id": "ride-new", **row}]
        return DummyQuery(self)

    def select(self, columns: str) -> DummyQuery:
        return DummyQuery(self)


class DummyAuth:
    def __init__(self, users: dict[str, str]) -> None:
        self.users = users

    def get_user(self, token: str):
        if token not in self.users:
            raise RuntimeError("invalid JWT")
        return SimpleNamespace(user=SimpleNamespace(id=self.users[token]))


class DummySupabase:
    def __init__(self, users: dict[str, str] | None = None) -> None:
        self.tables: dict[str, DummyTable] = {}
        self.auth = DummyAuth(users or {})

    def table(self, name: str) -> DummyTable:
        return self.tables.setdefault(name, DummyTable())


PASSENGER = Profile(id="passenger-1", user_id="user-1", full_name="Afi Passagère")
DRIVER = Profile(id="driver-1", user_id="user-2", full_name="Koffi Conducteur", is_driver=True)


def _ride() -> RideOffer:
    return RideOffer(
        id="ride-1",
        driver_id="driver-1",
        departure_city="Cotonou",
        arrival_city="Porto-Novo",
        departure_date=date(2026, 11, 2),
        departure_time=time(7, 30),
        price_per_seat=1500,
        total_seats=4,
        available_seats=2,
    )


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def api_client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def database(app) -> DummySupabase:
    client = DummySupabase()
    app.dependency_overrides[get_database] = lambda: client
    return client


@pytest.fixture
def ride_store(app) -> InMemoryRideStore:
    store = InMemoryRideStore([_ride()])
    app.dependency_overrides[get_ride_store] = lambda: store
    return store


def _login(app, profile: Profile) -> None:
    app.dependency_overrides[get_current_profile] = lambda: profile


def test_health(api_client: TestClient):
    response = api_client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_city_autocomplete(api_client: TestClient):
    response = api_client.get("/api/cities", params={"q": "cot", "limit": 6})
    assert response.status_code == 200
    payload = response.json()
    assert payload[0]["name"] == "Cotonou"
    assert payload[0]["department"] == "Littoral"


def test_city_lookup(api_client: TestClient):
    assert api_client.get("/api/cities/porto novo").json()["name"] == "Porto-Novo"
    assert api_client.get("/api/cities/Zogbodomey").status_code == 404


def test_distance_endpoint(api_client: TestClient):
    response = api_client.get("/api/pricing/distance", params={"from_city": "Porto-Novo", "to_city": "Cotonou"})
    payload = response.json()
    assert payload["available"] is True
    assert payload["distance_km"] == 35
    assert payload["duration"] == {"hours": 0, "minutes": 42}


def test_distance_endpoint_unknown_city(api_client: TestClient):
    response = api_client.get("/api/pricing/distance", params={"from_city": "Zogbodomey", "to_city": "Cotonou"})
    assert response.status_code == 200
    assert response.json()["available"] is False


def test_quote_endpoint(api_client: TestClient):
    response = api_client.get("/api/pricing/quote", params={"from_city": "Cotonou", "to_city": "Porto-Novo"})
    payload = response.json()
    assert payload["available"] is True
    quote = payload["quote"]
    assert quote["maxPrice"] == 1850
    assert quote["suggestedPrice"] == 1570
    assert quote["minPrice"] == 740
    assert quote["commission"] == {"rate": 0.05, "amount": 80}


def test_validate_endpoint(api_client: TestClient):
    response = api_client.post(
        "/api/pricing/validate",
        json={"from_city": "Cotonou", "to_city": "Porto-Novo", "price": 5000},
    )
    payload = response.json()
    assert payload["accepted"] is False
    assert "1850" in payload["warning"]


def test_publish_requires_authentication(api_client: TestClient):
    response = api_client.post("/api/rides", json={})
    assert response.status_code in (401, 422)

    response = api_client.post(
        "/api/rides",
        json={
            "departure_city": "Cotonou",
            "arrival_city": "Porto-Novo",
            "departure_date": "2026-11-02",
            "departure_time": "07:30",
            "price": 1500,
            "total_seats": 3,
        },
    )
    assert response.status_code == 401


def test_publish_rejects_price_over_cap(app, api_client: TestClient, database: DummySupabase):
    _login(app, DRIVER)
    response = api_client.post(
        "/api/rides",
        json={
            "departure_city": "Cotonou",
            "arrival_city": "Porto-Novo",
            "departure_date": "2026-11-02",
            "departure_time": "07:30",
            "price": 2500,
            "total_seats": 3,
        },
    )
    assert response.status_code == 422
    assert "1850" in response.json()["detail"]
    assert "rides" not in database.tables


def test_publish_ride(app, api_client: TestClient, database: DummySupabase):
    _login(app, DRIVER)
    response = api_client.post(
        "/api/rides",
        json={
            "departure_city": "Cotonou",
            "arrival_city": "Porto-Novo",
            "departure_date": "2026-11-02",
            "departure_time": "07:30",
            "price": 1500,
            "total_seats": 3,
        },
    )
    assert response.status_code == 201
    inserted = database.tables["rides"].inserted[0]
    assert inserted["driver_id"] == "driver-1"
    assert inserted["available_seats"] == 3
    assert inserted["departure_date"] == "2026-11-02"


def test_book_ride(app, api_client: TestClient, ride_store: InMemoryRideStore):
    _login(app, PASSENGER)
    response = api_client.post("/api/rides/ride-1/reservations", json={"seats": 2, "payment_method": "moov_money"})

    assert response.status_code == 201
    payload = response.json()
    assert payload["available_seats"] == 0
    assert payload["reservation"]["total_price"] == 3000
    assert payload["reservation"]["status"] == "pending"


def test_book_ride_errors(app, api_client: TestClient, ride_store: InMemoryRideStore):
    _login(app, PASSENGER)
    assert api_client.post("/api/rides/ride-1/reservations", json={"seats": 3}).status_code == 409
    assert api_client.post("/api/rides/missing/reservations", json={"seats": 1}).status_code == 404

    _login(app, DRIVER)
    response = api_client.post("/api/rides/ride-1/reservations", json={"seats": 1})
    assert response.status_code == 403
    assert ride_store.get_ride("ride-1").available_seats == 2


def test_geolocation_error_message(api_client: TestClient):
    response = api_client.get("/api/geocoding/geolocation-errors/permission_denied")
    assert response.status_code == 200
    assert response.json()["kind"] == "permission_denied"


class FailingStore(InMemoryRideStore):
    def get_ride(self, ride_id: str):
        raise RuntimeError("invalid input syntax for type uuid")


def test_book_ride_backend_failure_returns_bad_gateway(app, api_client: TestClient):
    app.dependency_overrides[get_ride_store] = lambda: FailingStore()
    _login(app, PASSENGER)

    response = api_client.post("/api/rides/not-a-uuid/reservations", json={"seats": 1})

    assert response.status_code == 502
    assert response.json()["detail"] == "Erreur lors de la réservation"


def test_reservation_listing_backend_failure(app, api_client: TestClient, database: DummySupabase):
    _login(app, PASSENGER)
    database.table("reservations").error = RuntimeError("connection reset")

    assert api_client.get("/api/reservations/mine").status_code == 502
    assert api_client.get("/api/reservations/driver").status_code == 502


def test_reservation_listing(app, api_client: TestClient, database: DummySupabase):
    _login(app, PASSENGER)
    database.table("reservations").returned = [{"id": "res-1", "status": "pending"}]

    response = api_client.get("/api/reservations/mine")

    assert response.status_code == 200
    assert response.json() == [{"id": "res-1", "status": "pending"}]


def _booked(ride_store: InMemoryRideStore, database: DummySupabase) -> str:
    reservation, _ = ride_store.reserve_seats("ride-1", "passenger-1", 2, 3000, None)
    database.table("reservations").returned = [{"passenger_id": "passenger-1", "ride": {"driver_id": "driver-1"}}]
    return reservation.id


def test_cancel_reservation(app, api_client: TestClient, database: DummySupabase, ride_store: InMemoryRideStore):
    reservation_id = _booked(ride_store, database)
    _login(app, PASSENGER)

    response = api_client.patch(f"/api/reservations/{reservation_id}", json={"status": "cancelled"})

    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"
    assert ride_store.get_ride("ride-1").available_seats == 2


def test_update_reservation_invalid_transition(
    app, api_client: TestClient, database: DummySupabase, ride_store: InMemoryRideStore
):
    reservation_id = _booked(ride_store, database)
    ride_store.set_reservation_status(reservation_id, ReservationStatus.CANCELLED, release_seats=True)
    _login(app, DRIVER)

    response = api_client.patch(f"/api/reservations/{reservation_id}", json={"status": "confirmed"})

    assert response.status_code == 409
    assert ride_store.get_ride("ride-1").available_seats == 2


def test_update_reservation_of_someone_else(
    app, api_client: TestClient, database: DummySupabase, ride_store: InMemoryRideStore
):
    reservation_id = _booked(ride_store, database)
    _login(app, Profile(id="stranger-1", user_id="user-9", full_name="Inconnu"))

    response = api_client.patch(f"/api/reservations/{reservation_id}", json={"status": "cancelled"})

    assert response.status_code == 404
    assert ride_store.get_ride("ride-1").available_seats == 0


def test_update_reservation_backend_failure(app, api_client: TestClient, database: DummySupabase, ride_store):
    _login(app, PASSENGER)
    database.table("reservations").error = RuntimeError("connection reset")

    response = api_client.patch("/api/reservations/res-1", json={"status": "cancelled"})

    assert response.status_code == 502


def test_invalid_token_is_rejected(monkeypatch, api_client: TestClient):
    client = DummySupabase(users={"good-token": "user-1"})
    monkeypatch.setattr("covoit.api.deps.get_supabase_client", lambda: client)

    response = api_client.get("/api/reservations/mine", headers={"Authorization": "Bearer expired-token"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Session invalide ou expirée"


def test_token_without_profile_is_forbidden(monkeypatch, api_client: TestClient):
    client = DummySupabase(users={"good-token": "user-1"})
    monkeypatch.setattr("covoit.api.deps.get_supabase_client", lambda: client)

    response = api_client.get("/api/reservations/mine", headers={"Authorization": "Bearer good-token"})

    assert response.status_code == 403


def test_valid_token_resolves_profile(monkeypatch, api_client: TestClient):
    client = DummySupabase(users={"good-token": "user-1"})
    client.table("profiles").returned = [{"id": "passenger-1", "user_id": "user-1", "full_name": "Afi"}]
    monkeypatch.setattr("covoit.api.deps.get_supabase_client", lambda: client)

    response = api_client.get("/api/reservations/mine", headers={"Authorization": "Bearer good-token"})

    assert response.status_code == 200


@pytest.mark.parametrize(("origin", "destination"), [("Cotonou", "cotonou"), ("Porto-Novo", "porto novo")])
def test_publish_rejects_same_city(app, api_client: TestClient, database: DummySupabase, origin, destination):
    _login(app, DRIVER)
    response = api_client.post(
        "/api/rides",
        json={
            "departure_city": origin,
            "arrival_city": destination,
            "departure_date": "2026-11-02",
            "departure_time": "07:30",
            "price": 500,
            "total_seats": 3,
        },
    )
    assert response.status_code == 422
    assert "différente" in str(response.json()["detail"])
    assert "rides" not in database.tables
