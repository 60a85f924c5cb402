import json

import pytest


@pytest.fixture
def abc_nodes():
    return [
        {"id": "A", "name": "Alpha", "organizer": True, "group": 1},
        {"id": "B", "name": "Bravo", "organizer": False, "group": 1},
        {"id": "C", "name": "Charlie", "organizer": True, "group": 2},
    ]


@pytest.fixture
def abc_links():
    return [
        {"source": "A", "target": "B", "value": 1},
        {"source": "B", "target": "C", "value": 1},
        {"source": "A", "target": "C", "value": 1},
    ]


@pytest.fixture
def write_dataset(tmp_path):
    def _write(data, name="network_data.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write
