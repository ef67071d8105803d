from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    SCHEDULE_CREATE,
    SCHEDULE_DELETE,
    SCHEDULE_GET,
    SCHEDULE_LIST,
    SCHEDULE_SEAT_MAP,
)
from test.shared.utils import create_schedule
from test.test_constants import (
    DEFAULT_SCHEDULE_REQUEST,
    FUTURE_DATE,
    PAST_DATE,
    TEST_START_STATION,
    TEST_STOP_STATION,
    TEST_TRAIN_NAME,
)


@pytest.mark.integration
class TestCreateScheduleAPI:
    def test_requires_authentication(self, client: TestClient):
        response = client.post(SCHEDULE_CREATE, json=DEFAULT_SCHEDULE_REQUEST)

        assert response.status_code == 401

    def test_create_schedule(self, logged_in_client: TestClient):
        data = create_schedule(logged_in_client)

        assert data['id'] > 0
        assert data['trainName'] == TEST_TRAIN_NAME
        assert data['date'] == FUTURE_DATE
        assert data['departureTime'] == '08:30'
        assert data['arrivalTime'] == '11:45'
        assert data['startStation'] == TEST_START_STATION
        assert data['stopStation'] == TEST_STOP_STATION
        assert data['classes']['First'] == {'carriages': 1, 'rows': 10, 'cols': 6, 'capacity': 60}
        assert data['classes']['Second'] == {
            'carriages': 2,
            'rows': 12,
            'cols': 8,
            'capacity': 192,
        }
        assert data['unavailableSeats'] == {'First': ['FC1-A1'], 'Second': ['SC2-B3']}

    def test_layout_input_is_clamped(self, logged_in_client: TestClient):
        data = create_schedule(
            logged_in_client,
            first={'carriages': 0, 'rows': 40, 'cols': 'abc'},
            second={'carriages': '3', 'rows': 2.7},
            unavailableSeats=None,
        )

        assert data['classes']['First'] == {'carriages': 1, 'rows': 26, 'cols': 1, 'capacity': 26}
        assert data['classes']['Second'] == {'carriages': 3, 'rows': 2, 'cols': 1, 'capacity': 6}
        assert data['unavailableSeats'] == {'First': [], 'Second': []}

    def test_optional_times_may_be_omitted(self, logged_in_client: TestClient):
        data = create_schedule(logged_in_client, departureTime=None, arrivalTime='')

        assert data['departureTime'] is None
        assert data['arrivalTime'] is None

    @pytest.mark.parametrize(
        'overrides,detail',
        [
            ({'date': '24-12-2099'}, 'Invalid travel date format'),
            ({'departureTime': '8am'}, 'Invalid time format'),
            ({'unavailableSeats': {'First': ['FC2-A1']}}, 'does not exist in First class layout'),
            ({'unavailableSeats': {'Second': ['FC1-A1']}}, 'does not exist in Second class layout'),
            ({'unavailableSeats': {'First': ['A1']}}, 'Invalid seat ID format'),
            ({'unavailableSeats': {'Business': []}}, 'Invalid travel class'),
        ],
    )
    def test_invalid_input_is_rejected(self, logged_in_client: TestClient, overrides, detail):
        response = logged_in_client.post(
            SCHEDULE_CREATE, json={**DEFAULT_SCHEDULE_REQUEST, **overrides}
        )

        assert response.status_code == 400
        assert detail in response.json()['detail']

    def test_missing_required_field(self, logged_in_client: TestClient):
        payload = {k: v for k, v in DEFAULT_SCHEDULE_REQUEST.items() if k != 'trainName'}

        response = logged_in_client.post(SCHEDULE_CREATE, json=payload)

        assert response.status_code == 400

    def test_blank_station_is_rejected(self, logged_in_client: TestClient):
        response = logged_in_client.post(
            SCHEDULE_CREATE, json={**DEFAULT_SCHEDULE_REQUEST, 'startStation': '   '}
        )

        assert response.status_code == 400


@pytest.mark.integration
class TestQueryScheduleAPI:
    def test_list_is_ordered_by_departure(self, logged_in_client: TestClient):
        later = create_schedule(logged_in_client, date='2099-12-25', trainName='Later')
        evening = create_schedule(logged_in_client, departureTime='18:00', trainName='Evening')
        morning = create_schedule(logged_in_client, departureTime='06:00', trainName='Morning')

        response = logged_in_client.get(SCHEDULE_LIST)

        assert response.status_code == 200
        assert [s['id'] for s in response.json()] == [morning['id'], evening['id'], later['id']]

    def test_list_is_public(self, logged_in_client: TestClient):
        create_schedule(logged_in_client)
        logged_in_client.cookies.clear()

        response = logged_in_client.get(SCHEDULE_LIST)

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_upcoming_filter_hides_past_trains(self, logged_in_client: TestClient):
        past = create_schedule(logged_in_client, date=PAST_DATE, trainName='Departed')
        future = create_schedule(logged_in_client)

        everything = logged_in_client.get(SCHEDULE_LIST).json()
        upcoming = logged_in_client.get(SCHEDULE_LIST, params={'upcoming': 'true'}).json()

        assert {s['id'] for s in everything} == {past['id'], future['id']}
        assert [s['id'] for s in upcoming] == [future['id']]

    def test_get_schedule(self, logged_in_client: TestClient):
        created = create_schedule(logged_in_client)

        response = logged_in_client.get(SCHEDULE_GET.format(schedule_id=created['id']))

        assert response.status_code == 200
        assert response.json()['classes'] == created['classes']
        assert response.json()['unavailableSeats'] == created['unavailableSeats']

    def test_get_missing_schedule(self, client: TestClient):
        response = client.get(SCHEDULE_GET.format(schedule_id=999))

        assert response.status_code == 404
        assert response.json()['detail'] == 'Schedule not found'

    @pytest.mark.parametrize('schedule_id', ['abc', '0', '-3'])
    def test_get_invalid_id(self, client: TestClient, schedule_id):
        response = client.get(SCHEDULE_GET.format(schedule_id=schedule_id))

        assert response.status_code == 400
        assert response.json()['detail'] == 'Invalid schedule id'


@pytest.mark.integration
class TestDeleteScheduleAPI:
    def test_delete_schedule(self, logged_in_client: TestClient):
        created = create_schedule(logged_in_client)

        response = logged_in_client.delete(SCHEDULE_DELETE.format(schedule_id=created['id']))

        assert response.status_code == 200
        assert response.json() == {'success': True}
        gone = logged_in_client.get(SCHEDULE_GET.format(schedule_id=created['id']))
        assert gone.status_code == 404
        assert logged_in_client.get(SCHEDULE_LIST).json() == []

    def test_delete_twice(self, logged_in_client: TestClient):
        created = create_schedule(logged_in_client)
        logged_in_client.delete(SCHEDULE_DELETE.format(schedule_id=created['id']))

        response = logged_in_client.delete(SCHEDULE_DELETE.format(schedule_id=created['id']))

        assert response.status_code == 404

    @pytest.mark.parametrize('schedule_id', ['abc', '0'])
    def test_delete_invalid_id(self, logged_in_client: TestClient, schedule_id):
        response = logged_in_client.delete(SCHEDULE_DELETE.format(schedule_id=schedule_id))

        assert response.status_code == 400
        assert response.json()['detail'] == 'Invalid schedule id'

    def test_delete_requires_authentication(self, logged_in_client: TestClient):
        created = create_schedule(logged_in_client)
        logged_in_client.cookies.clear()

        response = logged_in_client.delete(SCHEDULE_DELETE.format(schedule_id=created['id']))

        assert response.status_code == 401


@pytest.mark.integration
class TestSeatMapAPI:
    def test_seat_map_of_a_carriage(self, logged_in_client: TestClient):
        created = create_schedule(logged_in_client)

        response = logged_in_client.get(
            SCHEDULE_SEAT_MAP.format(schedule_id=created['id'], travel_class='Second', carriage=2)
        )

        assert response.status_code == 200
        data = response.json()
        assert data['travelClass'] == 'Second'
        assert data['carriage'] == 2
        assert data['carriages'] == 2
        assert data['aisleAfter'] == 4
        assert len(data['rows']) == 12
        assert all(len(row) == 8 for row in data['rows'])

        first_row = data['rows'][0]
        assert first_row[0] == {
            'id': 'SC2-A1',
            'row': 'A',
            'column': '1',
            'isWindow': True,
            'available': True,
        }
        assert [seat['isWindow'] for seat in first_row] == [True] + [False] * 6 + [True]

        taken = [seat['id'] for row in data['rows'] for seat in row if not seat['available']]
        assert taken == ['SC2-B3']

    def test_other_carriage_has_no_taken_seats(self, logged_in_client: TestClient):
        created = create_schedule(logged_in_client)

        response = logged_in_client.get(
            SCHEDULE_SEAT_MAP.format(schedule_id=created['id'], travel_class='Second', carriage=1)
        )

        assert all(seat['available'] for row in response.json()['rows'] for seat in row)

    def test_carriage_out_of_range(self, logged_in_client: TestClient):
        created = create_schedule(logged_in_client)

        response = logged_in_client.get(
            SCHEDULE_SEAT_MAP.format(schedule_id=created['id'], travel_class='First', carriage=2)
        )

        assert response.status_code == 400
        assert 'out of range' in response.json()['detail']

    def test_unknown_class(self, logged_in_client: TestClient):
        created = create_schedule(logged_in_client)

        response = logged_in_client.get(
            SCHEDULE_SEAT_MAP.format(schedule_id=created['id'], travel_class='Business', carriage=1)
        )

        assert response.status_code == 400

    def test_missing_schedule(self, client: TestClient):
        response = client.get(
            SCHEDULE_SEAT_MAP.format(schedule_id=42, travel_class='First', carriage=1)
        )

        assert response.status_code == 404
