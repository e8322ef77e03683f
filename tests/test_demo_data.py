import asyncio
import random
from datetime import datetime, timedelta, timezone

from app.models.irrigation_log import IrrigationStatus
from app.services import demo_data


def test_demo_fields_follow_dashboard_ranges():
    fields = demo_data.generate_demo_fields("u1", count=200, rng=random.Random(1))
    assert len(fields) == 200
    assert len({f.id for f in fields}) == 200
    for i, field in enumerate(fields):
        assert field.owner_id == "u1"
        assert field.name.endswith(f"Sector {i + 1}")
        assert field.crop in demo_data.DEMO_CROPS
        assert abs(field.lat - 34.0522) <= 0.06
        assert abs(field.lng - -118.2437) <= 0.06
        assert 40 <= field.moisture < 80
        assert 5.8 <= field.soil_ph <= 7.2
        assert 20 <= field.temp < 30
        assert 75 <= field.health < 95


def test_demo_predictions_follow_dashboard_ranges():
    before = datetime.now(timezone.utc)
    predictions = demo_data.generate_demo_predictions("u1", count=300, rng=random.Random(2))
    after = datetime.now(timezone.utc)
    assert len(predictions) == 300
    for prediction in predictions:
        assert prediction.user_id == "u1"
        assert 5.5 <= prediction.soil_ph <= 7.5
        assert 600 <= prediction.rainfall_mm < 1400
        assert 15 <= prediction.temperature_c < 30
        assert 100 <= prediction.fertilizer_kg_per_ha < 200
        assert 3000 <= prediction.predicted_yield < 8000
        assert 0.85 <= prediction.confidence_score < 0.95
        assert before - timedelta(days=365) <= prediction.created_at <= after


def test_demo_irrigation_logs_reference_generated_fields():
    rng = random.Random(3)
    fields = demo_data.generate_demo_fields("u1", count=20, rng=rng)
    logs = demo_data.generate_demo_irrigation_logs("u1", fields, count=500, rng=rng)
    names = {f.name for f in fields}
    assert len(logs) == 500
    assert all(log.field_name in names for log in logs)
    assert all(15 <= log.duration_minutes < 60 for log in logs)
    assert all(500 <= log.volume_liters < 2500 for log in logs)
    in_progress = sum(log.status == IrrigationStatus.IN_PROGRESS for log in logs)
    assert 0 < in_progress < 150


def test_demo_irrigation_logs_without_fields():
    assert demo_data.generate_demo_irrigation_logs("u1", [], rng=random.Random(4)) == []


def test_seeded_generation_is_reproducible():
    first = demo_data.generate_demo_fields("u1", count=5, rng=random.Random(9))
    second = demo_data.generate_demo_fields("u1", count=5, rng=random.Random(9))
    assert [(f.name, f.crop, f.lat, f.moisture) for f in first] == [
        (f.name, f.crop, f.lat, f.moisture) for f in second
    ]


def test_seed_demo_data_inserts_all_sets(monkeypatch):
    captured = {}

    def fake_insert(name):
        async def _insert(documents):
            captured[name] = list(documents)
            return len(captured[name])

        return _insert

    monkeypatch.setattr(demo_data, "insert_fields", fake_insert("fields"))
    monkeypatch.setattr(demo_data, "insert_predictions", fake_insert("predictions"))
    monkeypatch.setattr(demo_data, "insert_irrigation_logs", fake_insert("irrigation_logs"))

    inserted = asyncio.run(demo_data.seed_demo_data("admin-1", rng=random.Random(5)))

    assert inserted == {"fields": 250, "predictions": 500, "irrigation_logs": 100}
    assert all(f.owner_id == "admin-1" for f in captured["fields"])
    assert all(p.user_id == "admin-1" for p in captured["predictions"])
    field_names = {f.name for f in captured["fields"]}
    assert all(log.field_name in field_names for log in captured["irrigation_logs"])
