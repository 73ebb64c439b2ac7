# tests/api/test_validation_api.py
from fastapi.testclient import TestClient

from petitbac.core.config import settings

VALIDATION_URL = f"{settings.API_V1_STR}/validation"

def test_validate_known_word(client: TestClient):
    response = client.get(f"{VALIDATION_URL}/validate", params={"category": "ANIMAL", "word": "Chien"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "VALID"
    assert body["source"] == "FIXED_LIST"
    assert body["confidence"] == 1.0

def test_validate_twice_hits_cache(client: TestClient):
    client.get(f"{VALIDATION_URL}/validate", params={"category": "Pays", "word": "france"})
    response = client.get(f"{VALIDATION_URL}/validate", params={"category": "Pays", "word": "France"})

    assert response.json()["source"] == "LOCAL_DB"

def test_validate_unknown_category_is_reported_in_body(client: TestClient):
    response = client.get(f"{VALIDATION_URL}/validate", params={"category": "UNKNOWNCAT", "word": "chien"})

    assert response.status_code == 200
    assert response.json()["status"] == "ERROR"
    assert response.json()["details"] == "Unknown category: UNKNOWNCAT"

def test_validate_missing_parameters(client: TestClient):
    response = client.get(f"{VALIDATION_URL}/validate", params={"category": "ANIMAL"})
    assert response.json()["status"] == "INVALID"

    response = client.get(f"{VALIDATION_URL}/validate", params={"word": "chien"})
    assert response.json()["status"] == "ERROR"

def test_list_categories(client: TestClient):
    response = client.get(f"{VALIDATION_URL}/categories")

    assert response.status_code == 200
    categories = {item["name"]: item for item in response.json()}
    assert len(categories) == 8
    assert categories["FRUIT"]["display_name"] == "Fruit/Légume"
    assert categories["METIER"]["hint"] == "Une profession"

def test_stats_and_clear_cache(client: TestClient):
    client.get(f"{VALIDATION_URL}/validate", params={"category": "FRUIT", "word": "pomme"})

    stats = client.get(f"{VALIDATION_URL}/stats").json()
    assert stats["cached_words"] == 1
    assert stats["available_validators"] == ["LOCAL_DB", "FIXED_LIST"]

    response = client.delete(f"{VALIDATION_URL}/cache")
    assert response.status_code == 200
    assert response.json() == {"deleted": 1}
    assert client.get(f"{VALIDATION_URL}/stats").json()["cached_words"] == 0

def test_health_check(client: TestClient):
    response = client.get(f"{settings.API_V1_STR}/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["requests"]["total_requests"] >= 1
