"""Tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.main import app


class TestCipherApi:
    """Test the /encrypt, /decrypt and /ciphers endpoints."""

    @pytest.fixture
    def client(self):
        with TestClient(app) as client:
            yield client
        app.dependency_overrides.clear()

    def test_list_ciphers(self, client):
        response = client.get("/api/v1/ciphers")

        assert response.status_code == 200
        types = {item["cipher_type"] for item in response.json()}
        assert types == {"additive", "table"}

    def test_encrypt_additive(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "ПРИВЕТ, МИР!", "cipher_type": "additive", "key": "в"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["ciphertext"] == "СТКДЖФОКТ"
        assert body["cipher_type"] == "additive"
        assert body["key_used"] == "В"
        assert "В=2" in body["explanation"]

    def test_decrypt_additive(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": "ОПЗБДС", "cipher_type": "additive", "key": "Я"},
        )

        assert response.status_code == 200
        assert response.json()["plaintext"] == "ПРИВЕТ"

    @pytest.mark.parametrize("key", [3, "3"])
    def test_encrypt_table(self, client, key):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "ПРИВЕТ мир", "cipher_type": "table", "key": key},
        )

        assert response.status_code == 200
        assert response.json()["ciphertext"] == "ИТРРЕИПВМ"
        assert response.json()["key_used"] == 3

    def test_decrypt_table(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": "ГВБАД", "cipher_type": "table", "key": 4},
        )

        assert response.status_code == 200
        assert response.json()["plaintext"] == "АБВГД"

    @pytest.mark.parametrize(
        "cipher_type, key, message",
        [
            ("additive", "", "Empty key"),
            ("additive", "МИР123", "Invalid key: non-alphabetic character"),
            ("additive", 7, "Invalid key: non-alphabetic character"),
            ("table", 0, "Invalid key: must be a positive integer"),
            ("table", 150, "Invalid key: too large"),
            ("table", "wide", "Invalid key: must be an integer"),
        ],
    )
    def test_invalid_key(self, client, cipher_type, key, message):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "ПРИВЕТ", "cipher_type": cipher_type, "key": key},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_key"
        assert response.json()["message"] == message

    def test_encrypt_without_letters(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "1234+8765=9999", "cipher_type": "additive", "key": "МИР"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "empty_text"

    @pytest.mark.parametrize(
        "ciphertext, error",
        [
            ("", "empty_text"),
            ("ьИРМИ", "invalid_cipher_text"),
            ("МИР МИ", "invalid_cipher_text"),
        ],
    )
    def test_decrypt_rejects_bad_ciphertext(self, client, ciphertext, error):
        response = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": ciphertext, "cipher_type": "additive", "key": "МИР"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == error

    def test_unknown_cipher_type(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "ПРИВЕТ", "cipher_type": "caesar", "key": "3"},
        )

        assert response.status_code == 422

    def test_text_too_long(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(max_text_length=5)

        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "ПРИВЕТ", "cipher_type": "table", "key": 2},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "text_too_long"
        assert response.json()["message"] == "Plaintext exceeds maximum length of 5"
        assert response.json()["details"] == {"length": 6, "max_length": 5}

    def test_ciphertext_too_long(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(max_text_length=5)

        response = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": "ИТРРЕИПВМ", "cipher_type": "table", "key": 3},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "text_too_long"

    def test_table_key_with_thousands_of_digits(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "ПРИВЕТ", "cipher_type": "table", "key": "1" * 5000},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_key"
        assert response.json()["message"] == "Invalid key: too large"

    @pytest.mark.parametrize("endpoint", ["encrypt", "decrypt"])
    @pytest.mark.parametrize("cipher_type", ["table", "additive"])
    def test_boolean_key_rejected(self, client, endpoint, cipher_type):
        text_field = "plaintext" if endpoint == "encrypt" else "ciphertext"

        response = client.post(
            f"/api/v1/{endpoint}",
            json={text_field: "ПРИВЕТ", "cipher_type": cipher_type, "key": True},
        )

        assert response.status_code == 422

    def test_float_key_rejected(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "ПРИВЕТ", "cipher_type": "table", "key": 3.0},
        )

        assert response.status_code == 422
