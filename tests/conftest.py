import csv
from pathlib import Path
from types import SimpleNamespace

import pytest

CSV_FIELDS = [
    "id",
    "title",
    "address",
    "type",
    "latitude",
    "longitude",
    "scheduled_date",
    "description",
    "ngo_name",
    "created_at",
]

# Origin in central Kuala Lumpur; campaigns are offset due north so the
# haversine distance is exactly R * delta-latitude.
KL_ORIGIN = (3.1390, 101.6869)

SAMPLE_ROWS = [
    {"id": "c-mid", "title": "Bubur Lambuk", "address": "Kampung Baru", "type": "infaq",
     "latitude": "3.1831", "longitude": "101.6869", "scheduled_date": "2099-01-01T10:00:00+08:00"},
    {"id": "c-near", "title": "Food Bank Pudu", "address": "Jalan Pudu", "type": "sumbangan",
     "latitude": "3.1399", "longitude": "101.6869", "scheduled_date": "2020-01-01T10:00:00Z"},
    {"id": "c-far", "title": "Sumbangan Gombak", "address": "Gombak", "type": "sumbangan",
     "latitude": "3.2289", "longitude": "101.6869", "scheduled_date": ""},
    {"id": "c-nowhere", "title": "Draft Campaign", "address": "TBD", "type": "infaq",
     "latitude": "", "longitude": "", "scheduled_date": ""},
]


def write_campaigns_csv(path: Path, rows: list[dict]) -> Path:
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow({field: row.get(field, "") for field in CSV_FIELDS})
    return path


class FakeQuery:
    def __init__(self, client: "FakeSupabase", table: str) -> None:
        self._client = client
        self._table = table
        self._result = list(client.rows)

    def select(self, *args, **kwargs):
        return self

    def limit(self, count: int):
        self._result = self._result[:count]
        return self

    def insert(self, row: dict):
        self._client.inserted.append((self._table, row))
        self._result = [{**row, "id": f"new-{len(self._client.inserted)}"}]
        return self

    def execute(self):
        if self._client.error is not None:
            raise self._client.error
        return SimpleNamespace(data=self._result, count=len(self._client.rows))


class FakeSupabase:
    def __init__(self, rows: list[dict] | None = None, error: Exception | None = None) -> None:
        self.rows = rows or []
        self.error = error
        self.inserted: list[tuple[str, dict]] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


@pytest.fixture
def campaigns_csv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the repository at a CSV export and disable the database."""
    from foodradar.config import settings
    from foodradar.data import campaigns_repository

    path = write_campaigns_csv(tmp_path / "campaigns.csv", SAMPLE_ROWS)
    monkeypatch.setattr(settings, "campaigns_file", path)
    monkeypatch.setattr(campaigns_repository, "get_supabase_client", lambda: None)
    return path
