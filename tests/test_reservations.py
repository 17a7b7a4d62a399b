# tests/test_reservations.py

import unittest

from macim.core import reservations
from macim.core.errors import ConflictError, NotFoundError, ValidationError
from macim.models import Reservation
from tests.base import ApiTestCase

BOOKING = {'field_id': '1', 'field_name': 'Arena Halı Saha', 'date': '2025-06-01', 'time': '18:00', 'price': 1200}

class SlotMathTestCase(unittest.TestCase):
    def test_default_hours(self):
        slots = reservations.build_slots(12, 24)
        self.assertEqual(slots[0], '12:00')
        self.assertEqual(slots[-1], '23:00')
        self.assertEqual(len(slots), 12)

    def test_close_hour_is_exclusive(self):
        self.assertEqual(reservations.build_slots(9, 12), ['09:00', '10:00', '11:00'])

    def test_slot_count_matches_formula(self):
        for open_hour in range(0, 23):
            for close_hour in range(open_hour + 1, 25):
                expected = min(23, close_hour - 1) - open_hour + 1
                self.assertEqual(len(reservations.build_slots(open_hour, close_hour)), expected)

    def test_time_normalisation(self):
        self.assertEqual(reservations.parse_time('18:00:00'), '18:00')
        self.assertEqual(reservations.parse_time('9:00'), '09:00')
        with self.assertRaises(ValidationError):
            reservations.parse_time('six pm')
        with self.assertRaises(ValidationError):
            reservations.parse_date('01.06.2025')

class ReservationRoutesTestCase(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.alice = self.register('a@x.com')
        self.bob = self.register('b@x.com')

    def test_same_slot_twice_conflicts(self):
        first = self.client.post('/reservations', headers=self.headers(self.alice), json=BOOKING)
        self.assertEqual(first.status_code, 200)
        self.assertTrue(first.get_json()['ok'])

        second = self.client.post('/reservations', headers=self.headers(self.bob), json=BOOKING)
        self.assertEqual(second.status_code, 409)
        self.assertEqual(second.get_json(), {'ok': False, 'error': 'slot_taken'})
        self.assertEqual(Reservation.query.count(), 1)

    def test_seconds_do_not_dodge_the_constraint(self):
        self.client.post('/reservations', headers=self.headers(self.alice), json=BOOKING)
        response = self.client.post('/reservations', headers=self.headers(self.bob),
                                    json=dict(BOOKING, time='18:00:00'))
        self.assertEqual(response.status_code, 409)

    def test_missing_fields(self):
        response = self.client.post('/reservations', headers=self.headers(self.alice),
                                    json=dict(BOOKING, field_name=''))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()['error'], 'missing_fields')

    def test_bad_price(self):
        response = self.client.post('/reservations', headers=self.headers(self.alice),
                                    json=dict(BOOKING, price='free'))
        self.assertEqual(response.get_json()['error'], 'invalid_price')

    def test_availability_empty_field(self):
        body = self.client.get('/reservations/availability?field_id=7&date=2025-06-01',
                               headers=self.headers(self.alice)).get_json()
        self.assertTrue(body['ok'])
        self.assertEqual(body['taken'], [])
        self.assertEqual(body['open_hour'], 12)
        self.assertEqual(body['close_hour'], 24)
        self.assertEqual(body['price'], 1200)
        self.assertEqual(len(body['slots']), 12)

    def test_availability_lists_taken(self):
        self.client.post('/reservations', headers=self.headers(self.alice), json=BOOKING)
        self.client.post('/reservations', headers=self.headers(self.bob), json=dict(BOOKING, time='20:00'))
        self.client.post('/reservations', headers=self.headers(self.bob), json=dict(BOOKING, date='2025-06-02'))

        body = self.client.get('/reservations/availability?field_id=1&date=2025-06-01',
                               headers=self.headers(self.alice)).get_json()
        self.assertEqual(body['taken'], ['18:00', '20:00'])

    def test_availability_requires_params(self):
        response = self.client.get('/reservations/availability?field_id=1', headers=self.headers(self.alice))
        self.assertEqual(response.status_code, 400)

    def test_custom_settings(self):
        response = self.client.put('/fields/42/settings', headers=self.headers(self.alice),
                                   json={'open_hour': 9, 'close_hour': 22, 'price': 900})
        self.assertEqual(response.get_json()['settings']['open_hour'], 9)

        body = self.client.get('/reservations/availability?field_id=42&date=2025-06-01',
                               headers=self.headers(self.alice)).get_json()
        self.assertEqual(body['price'], 900)
        self.assertEqual(body['slots'][0], '09:00')
        self.assertEqual(body['slots'][-1], '21:00')

    def test_invalid_settings(self):
        response = self.client.put('/fields/42/settings', headers=self.headers(self.alice),
                                   json={'open_hour': 20, 'close_hour': 18})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()['error'], 'invalid_hours')

    def test_list_and_cancel_own(self):
        first = self.client.post('/reservations', headers=self.headers(self.alice), json=BOOKING).get_json()['id']
        self.client.post('/reservations', headers=self.headers(self.alice), json=dict(BOOKING, date='2025-06-03'))

        mine = self.client.get('/my/reservations', headers=self.headers(self.alice)).get_json()['reservations']
        self.assertEqual([r['date'] for r in mine], ['2025-06-03', '2025-06-01'])
        self.assertEqual(self.client.get('/my/reservations', headers=self.headers(self.bob)).get_json()['reservations'], [])

        response = self.client.delete(f'/my/reservations/{first}', headers=self.headers(self.bob))
        self.assertEqual(response.status_code, 404)

        response = self.client.delete(f'/my/reservations/{first}', headers=self.headers(self.alice))
        self.assertEqual(response.get_json(), {'ok': True})

        # the slot is free again
        again = self.client.post('/reservations', headers=self.headers(self.bob), json=BOOKING)
        self.assertEqual(again.status_code, 200)

    def test_legacy_cancel_path(self):
        reservation_id = self.client.post('/reservations', headers=self.headers(self.alice), json=BOOKING).get_json()['id']
        response = self.client.delete(f'/reservations/{reservation_id}', headers=self.headers(self.alice))
        self.assertEqual(response.status_code, 200)

    def test_profile_reservations(self):
        response = self.client.post('/profile-reservations', headers=self.headers(self.alice),
                                    json={'title': 'Antrenman', 'date': '2025-06-05', 'time': '19:00'})
        self.assertTrue(response.get_json()['ok'])
        entries = self.client.get('/my/profile-reservations', headers=self.headers(self.alice)).get_json()['reservations']
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0]['title'], 'Antrenman')

        response = self.client.post('/profile-reservations', headers=self.headers(self.alice), json={'title': 'x'})
        self.assertEqual(response.status_code, 400)

class LedgerTestCase(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.alice = self.user_id(self.register('a@x.com'))
        self.bob = self.user_id(self.register('b@x.com'))

    def test_conflict_regardless_of_owner(self):
        reservations.create_reservation(self.alice, '1', 'Arena', '2025-06-01', '18:00', 1200)
        for owner in (self.alice, self.bob):
            with self.assertRaises(ConflictError) as caught:
                reservations.create_reservation(owner, '1', 'Arena', '2025-06-01', '18:00', 1200)
            self.assertEqual(caught.exception.code, 'slot_taken')

    def test_cancel_missing(self):
        with self.assertRaises(NotFoundError):
            reservations.cancel_reservation(self.alice, 999)

if __name__ == '__main__':
    unittest.main()
