from homehelp.domain.catalog.repository import CatalogRepository
from homehelp.seed import seed_catalog


def test_seed_is_idempotent(db_session):
    assert seed_catalog(db_session) is True
    assert seed_catalog(db_session) is False
    assert len(CatalogRepository.get_all_services(db_session)) == 5
    assert len(CatalogRepository.get_all_providers(db_session)) == 6


def test_list_services(client, seeded):
    response = client.get("/api/services")
    assert response.status_code == 200
    names = [s["name"] for s in response.json()]
    assert names == [
        "House Cleaning",
        "Yard Work",
        "Grocery Shopping",
        "Caregiver Services",
        "Home Repairs",
    ]
    assert response.json()[0]["inclusions"][0] == "Dusting of all surfaces and furniture"


def test_get_service_not_found(client, seeded):
    assert client.get("/api/services/999").status_code == 404


def test_get_provider(client, seeded):
    response = client.get("/api/providers/1")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Sarah Johnson"
    assert body["services"] == ["House Cleaning"]
    assert body["isFavorite"] is False


def test_get_provider_not_found(client, seeded):
    assert client.get("/api/providers/999").status_code == 404


def test_providers_by_service(client, seeded):
    response = client.get("/api/services/1/providers")
    assert [p["name"] for p in response.json()] == ["Sarah Johnson", "Michael Chen"]

    legacy = client.get("/api/providers/service/1")
    assert legacy.json() == response.json()


def test_providers_for_unknown_service_is_empty(client, seeded):
    response = client.get("/api/services/999/providers")
    assert response.status_code == 200
    assert response.json() == []


def test_provider_can_offer_several_services(db_session):
    cleaning = CatalogRepository.create_service(
        db_session, name="House Cleaning", short_description="s", description="d", icon="i", inclusions=[]
    )
    yard = CatalogRepository.create_service(
        db_session, name="Yard Work", short_description="s", description="d", icon="i", inclusions=[]
    )
    provider = CatalogRepository.create_provider(
        db_session,
        ["House Cleaning", "Yard Work", "Pool Care"],
        name="Pat",
        experience="3 years",
        rating=4.0,
        reviews=3,
        tags=[],
    )

    assert provider.service_names == ["House Cleaning", "Yard Work"]
    assert CatalogRepository.get_providers_by_service(db_session, cleaning.id) == [provider]
    assert CatalogRepository.get_providers_by_service(db_session, yard.id) == [provider]


def test_favorite_flag_is_per_user(client, seeded, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob

    assert client.post("/api/user/favorites", json={"providerId": 2}, headers=alice_headers).status_code == 201

    alice_view = {p["id"]: p["isFavorite"] for p in client.get("/api/providers", headers=alice_headers).json()}
    bob_view = {p["id"]: p["isFavorite"] for p in client.get("/api/providers", headers=bob_headers).json()}
    anonymous_view = {p["id"]: p["isFavorite"] for p in client.get("/api/providers").json()}

    assert alice_view[2] is True
    assert alice_view[1] is False
    assert bob_view[2] is False
    assert anonymous_view[2] is False

    # Alice's flag never leaks into the stored provider
    assert client.get("/api/providers/2", headers=bob_headers).json()["isFavorite"] is False
    assert client.get("/api/providers/2", headers=alice_headers).json()["isFavorite"] is True


def test_all_providers_listed_without_task_route(client, seeded):
    assert len(client.get("/api/providers").json()) == 6
    assert client.get("/api/tasks/cleaning/providers").status_code == 404
