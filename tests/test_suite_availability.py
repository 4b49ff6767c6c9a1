"""
Tests for the suite availability ledger: flag writes, calendar lookups
and drift between the flag and the reservation table.
"""

import pytest
from datetime import timedelta
from database import get_db, immediate_transaction
from utils.exceptions import InvalidInputError


def _insert_stay(reservation_id, customer_id, suite_id, check_in, check_out):
    db = get_db()
    db.execute('''
        INSERT INTO reservations (id, customer_id, suite_id, check_in_date, check_out_date)
        VALUES (?, ?, ?, ?, ?)
    ''', (reservation_id, customer_id, suite_id, check_in.isoformat(), check_out.isoformat()))
    db.commit()


class TestFlagWrites:
    """Flag mutations run inside the caller's transaction."""

    def test_mark_unavailable_and_available(self, app, hotel):
        from models.suite_availability import mark_available, mark_unavailable
        from models.suite import get_suite_by_id

        with immediate_transaction() as cursor:
            mark_unavailable('S1', cursor)
        assert get_suite_by_id('S1')['available'] is False

        with immediate_transaction() as cursor:
            mark_available('S1', cursor)
        assert get_suite_by_id('S1')['available'] is True

    def test_flag_write_rolled_back_with_transaction(self, app, hotel):
        """An exception inside the transaction discards the flag change."""
        from models.suite_availability import mark_unavailable
        from models.suite import get_suite_by_id

        with pytest.raises(RuntimeError):
            with immediate_transaction() as cursor:
                mark_unavailable('S1', cursor)
                raise RuntimeError('boom')

        assert get_suite_by_id('S1')['available'] is True
        assert not get_db().in_transaction


class TestFindFreeSuites:
    """Calendar lookups computed from reservation intervals."""

    def test_all_free_without_reservations(self, app, hotel, today):
        """The flag is ignored: S3 is flagged unavailable but has no stays."""
        from models.suite_availability import find_free_suites

        free = find_free_suites(today, today + timedelta(days=3))
        assert [s['id'] for s in free] == ['S1', 'S2', 'S3']

    def test_overlap_is_inclusive(self, app, hotel, today):
        """A stay touching the window on either end blocks the suite."""
        from models.suite_availability import find_free_suites

        _insert_stay('R1', 'C1', 'S1', today + timedelta(days=5), today + timedelta(days=7))

        ids = [s['id'] for s in find_free_suites(today, today + timedelta(days=5))]
        assert 'S1' not in ids

        ids = [s['id'] for s in find_free_suites(today + timedelta(days=7), today + timedelta(days=9))]
        assert 'S1' not in ids

        ids = [s['id'] for s in find_free_suites(today + timedelta(days=8), today + timedelta(days=9))]
        assert 'S1' in ids

    def test_filter_by_type(self, app, hotel, today):
        from models.suite_availability import find_free_suites

        free = find_free_suites(today, today + timedelta(days=1), suite_type='deluxe')
        assert [s['id'] for s in free] == ['S2']

    def test_reversed_window(self, app, hotel, today):
        from models.suite_availability import find_free_suites

        with pytest.raises(InvalidInputError):
            find_free_suites(today + timedelta(days=2), today)

    def test_free_route(self, client, hotel, today):
        """GET /api/suites/free returns suites open for the window."""
        _insert_stay('R1', 'C1', 'S2', today, today + timedelta(days=2))

        response = client.get('/api/suites/free', query_string={
            'start_date': today.isoformat(),
            'end_date': (today + timedelta(days=1)).isoformat()
        })
        assert response.status_code == 200
        assert [s['id'] for s in response.get_json()['data']] == ['S1', 'S3']

    def test_free_route_missing_dates(self, client, hotel):
        response = client.get('/api/suites/free')
        assert response.status_code == 400
        assert response.get_json()['success'] is False


class TestAvailabilityDrift:
    """Flag versus active reservations."""

    def test_flagged_unavailable_without_stays(self, app, hotel):
        """S3 is created unavailable with no reservations."""
        from models.suite_availability import find_availability_drift

        drift = find_availability_drift()
        assert drift == [{
            'suite_id': 'S3',
            'available': False,
            'active_reservations': 0,
            'expected_available': True
        }]

    def test_available_with_active_stay(self, app, hotel, today):
        """A stay inserted behind the ledger's back shows up as drift."""
        from models.suite_availability import find_availability_drift

        _insert_stay('R1', 'C1', 'S1', today, today + timedelta(days=2))

        ids = [entry['suite_id'] for entry in find_availability_drift()]
        assert ids == ['S1', 'S3']

    def test_finished_stay_is_drift(self, app, hotel, today):
        """A suite still flagged after check-out has passed is reported."""
        from models.reservation import create_reservation
        from models.suite_availability import find_availability_drift

        reservation = create_reservation('C1', 'S1', today, today + timedelta(days=1))
        db = get_db()
        db.execute('''
            UPDATE reservations SET check_in_date = ?, check_out_date = ? WHERE id = ?
        ''', ((today - timedelta(days=3)).isoformat(), today.isoformat(), reservation['id']))
        db.commit()

        assert 'S1' in [entry['suite_id'] for entry in find_availability_drift()]

    def test_admission_leaves_no_drift(self, app, hotel, today):
        """Reservations made through admission keep the flag in step."""
        from models.reservation import create_reservation
        from models.suite_availability import find_availability_drift

        create_reservation('C1', 'S1', today, today + timedelta(days=2))
        assert [entry['suite_id'] for entry in find_availability_drift()] == ['S3']

    def test_fix_drift(self, app, hotel, today):
        from models.suite import get_suite_by_id
        from models.suite_availability import find_availability_drift, fix_availability_drift

        _insert_stay('R1', 'C1', 'S1', today, today + timedelta(days=2))

        fixed = fix_availability_drift()
        assert [entry['suite_id'] for entry in fixed] == ['S1', 'S3']
        assert find_availability_drift() == []
        assert get_suite_by_id('S1')['available'] is False
        assert get_suite_by_id('S3')['available'] is True

    def test_cli_check_availability(self, app, hotel):
        runner = app.test_cli_runner()

        result = runner.invoke(args=['check-availability'])
        assert result.exit_code == 0
        assert 'Suite S3' in result.output
        assert '1 suite(s) with availability drift.' in result.output

    def test_cli_check_availability_fix(self, app, hotel):
        from models.suite_availability import find_availability_drift

        runner = app.test_cli_runner()

        result = runner.invoke(args=['check-availability', '--fix'])
        assert result.exit_code == 0
        assert 'FIXED' in result.output
        assert find_availability_drift() == []

        result = runner.invoke(args=['check-availability'])
        assert 'No availability drift found.' in result.output
