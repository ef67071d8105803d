from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import HEALTH


@pytest.mark.integration
class TestHealthAPI:
    def test_health_reports_database(self, client: TestClient):
        response = client.get(HEALTH)

        assert response.status_code == 200
        data = response.json()
        assert data['status'] == 'ok'
        assert data['database'] == 'ok'
        assert data['env'] == 'test'
        assert 'time' in data
