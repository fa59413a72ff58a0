import logging
import threading
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from api.config import AppConfig, load_config
from api.main import create_app
from framework.llm.config import GeminiConfig


class FakeLLMClient:
    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


class BlockingLLMClient:
    def __init__(self, release: threading.Event) -> None:
        self.release = release
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        self.release.wait(timeout=5)
        return "Welcome!"


def _config(welcome_on_startup: bool = False) -> AppConfig:
    return AppConfig(
        host="127.0.0.1",
        port=3400,
        cors_origins=["*"],
        log_level="INFO",
        welcome_on_startup=welcome_on_startup,
    )


def _client(fake: FakeLLMClient) -> TestClient:
    return TestClient(create_app(client=fake, config=_config()))


def test_health():
    response = _client(FakeLLMClient()).get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_advisories_listing():
    response = _client(FakeLLMClient()).get("/api/advisories")

    assert response.status_code == 200
    paths = {item["path"]: item["name"] for item in response.json()}
    assert paths["/bloodSugar"] == "bloodSugarInterpreter"
    assert paths["/medication"] == "medicationInfo"
    assert len(paths) == 5


def test_blood_sugar_endpoint():
    fake = FakeLLMClient("Your reading is in range.\n\nKeep it up.")

    response = _client(fake).post(
        "/bloodSugar",
        json={"data": {"reading": 145, "meal_timing": "after_meal", "meal_type": "lunch"}},
    )

    assert response.status_code == 200
    assert response.json() == {
        "result": {
            "status": "normal",
            "interpretation": "Your reading is in range.",
            "recommendation": "Keep it up.",
        }
    }
    assert "Reading: 145.0 mg/dL" in fake.prompts[0]


def test_meal_plan_endpoint():
    fake = FakeLLMClient("BREAKFAST: oats\n\nLUNCH: salad\n\nDINNER: soup\n\nSNACKS: almonds")

    response = _client(fake).post(
        "/mealPlan",
        json={"data": {"diet_type": "vegetarian", "allergies": "none", "calorie_limit": 1800}},
    )

    assert response.status_code == 200
    assert response.json()["result"] == {
        "breakfast": "oats",
        "lunch": "salad",
        "dinner": "soup",
        "snacks": "almonds",
    }


def test_symptoms_endpoint_emergency():
    fake = FakeLLMClient("EMERGENCY: call 911 now.\n\nPossible DKA.\n\nGo to the ER.")

    response = _client(fake).post(
        "/symptoms",
        json={"data": {"symptoms": "confusion, vomiting", "duration": "1 hour"}},
    )

    assert response.status_code == 200
    assert response.json()["result"]["urgency"] == "emergency"
    assert response.json()["result"]["assessment"] == "EMERGENCY: call 911 now."


def test_exercise_endpoint():
    fake = FakeLLMClient("Safe.\n\nWalk.\n\n30 minutes, moderate.\n\nCarry glucose tabs.")

    response = _client(fake).post(
        "/exercise",
        json={
            "data": {
                "fitness_level": "beginner",
                "time_available": 30,
                "current_bg": 120,
                "preferred_type": "walking",
            }
        },
    )

    assert response.status_code == 200
    assert response.json()["result"] == {
        "safety_check": "Safe.",
        "recommendation": "Walk.",
        "duration": "30 minutes, moderate.",
        "precautions": "Carry glucose tabs.",
    }


def test_medication_endpoint():
    fake = FakeLLMClient("General information.")

    response = _client(fake).post(
        "/medication",
        json={"data": {"medication_name": "metformin", "purpose": "side_effects"}},
    )

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["information"] == "General information."
    assert result["disclaimer"].startswith("⚠️ IMPORTANT")


def test_invalid_body_is_rejected():
    fake = FakeLLMClient("text")
    client = _client(fake)

    missing_envelope = client.post("/bloodSugar", json={"reading": 145})
    bad_type = client.post("/bloodSugar", json={"data": {"reading": "high"}})

    assert missing_envelope.status_code == 422
    assert bad_type.status_code == 422
    assert fake.prompts == []


def test_backend_failure_returns_500_with_context():
    fake = FakeLLMClient(error=TimeoutError("deadline exceeded"))

    response = _client(fake).post(
        "/symptoms", json={"data": {"symptoms": "dizziness"}}
    )

    assert response.status_code == 500
    assert response.json() == {"detail": "failed to check symptoms"}


def test_startup_generates_welcome_message():
    fake = FakeLLMClient("Welcome to your diabetes advisor!")
    app = create_app(client=fake, config=_config(welcome_on_startup=True))

    with TestClient(app):
        pass

    assert len(fake.prompts) == 1
    assert "welcome" in fake.prompts[0].lower()


def test_startup_survives_welcome_failure():
    fake = FakeLLMClient(error=RuntimeError("offline"))
    app = create_app(client=fake, config=_config(welcome_on_startup=True))

    with TestClient(app) as client:
        assert client.get("/api/health").status_code == 200


def test_missing_api_key_is_fatal(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(ValueError):
        create_app(config=_config())


def test_gemini_config_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setenv("GEMINI_MODEL_NAME", "gemini-2.0-flash")
    monkeypatch.delenv("GEMINI_TEMPERATURE", raising=False)
    monkeypatch.delenv("GEMINI_MAX_OUTPUT_TOKENS", raising=False)

    config = GeminiConfig.from_env()

    assert config.api_key == "test-key"
    assert config.model_name == "gemini-2.0-flash"
    assert config.temperature is None
    assert config.max_output_tokens is None


def test_load_config_defaults(monkeypatch):
    for name in ("ADVISOR_HOST", "ADVISOR_PORT", "CORS_ORIGINS", "ADVISOR_WELCOME_ON_STARTUP"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example")

    config = load_config()

    assert config.host == "127.0.0.1"
    assert config.port == 3400
    assert config.cors_origins == ["http://a.example", "http://b.example"]
    assert config.welcome_on_startup is True


def test_create_app_applies_configured_log_level():
    root = logging.getLogger()
    previous_level = root.level
    root.setLevel(logging.WARNING)
    try:
        create_app(client=FakeLLMClient(), config=replace(_config(), log_level="DEBUG"))

        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous_level)


def test_startup_logs_welcome_and_endpoint_listing(caplog):
    fake = FakeLLMClient("Welcome aboard!")
    app = create_app(client=fake, config=_config(welcome_on_startup=True))

    with caplog.at_level(logging.INFO):
        with TestClient(app):
            pass

    assert "Available endpoints:" in caplog.text
    assert "POST /bloodSugar" in caplog.text
    assert "Welcome aboard!" in caplog.text


def test_startup_does_not_wait_for_welcome_message():
    release = threading.Event()
    fake = BlockingLLMClient(release)
    app = create_app(client=fake, config=_config(welcome_on_startup=True))

    with TestClient(app) as client:
        assert client.get("/api/health").status_code == 200
        assert not release.is_set()
        release.set()

    assert len(fake.prompts) == 1


def test_cors_explicit_origins_allow_credentials():
    config = replace(_config(), cors_origins=["http://a.example"])
    client = TestClient(create_app(client=FakeLLMClient(), config=config))

    allowed = client.options(
        "/bloodSugar",
        headers={
            "Origin": "http://a.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    rejected = client.options(
        "/bloodSugar",
        headers={
            "Origin": "http://b.example",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert allowed.status_code == 200
    assert allowed.headers["access-control-allow-origin"] == "http://a.example"
    assert allowed.headers["access-control-allow-credentials"] == "true"
    assert rejected.status_code == 400
    assert "access-control-allow-origin" not in rejected.headers
