"""Tests for appointments."""

from datetime import datetime

import pytest

from lawfirm.errors import InvalidTransitionError, InvalidValueError, NotFoundError
from lawfirm.models import AppointmentStatus
from lawfirm.services.appointment_service import AppointmentService


class TestCreateAppointment:
    def test_defaults(self, make_appointment):
        appointment = make_appointment()
        assert appointment.duration_minutes == 60
        assert appointment.status == AppointmentStatus.SCHEDULED
        assert appointment.case_id is None

    def test_with_case(self, make_appointment, case):
        assert make_appointment(case_id=case.id).case_id == case.id

    def test_unknown_case(self, make_appointment):
        with pytest.raises(NotFoundError) as exc:
            make_appointment(case_id=77)
        assert exc.value.entity == "Case"

    def test_unknown_client(self, make_appointment):
        with pytest.raises(NotFoundError) as exc:
            make_appointment(client_id=77)
        assert exc.value.entity == "Client"

    @pytest.mark.parametrize("minutes", [0, -30])
    def test_non_positive_duration(self, make_appointment, minutes):
        with pytest.raises(InvalidValueError):
            make_appointment(duration_minutes=minutes)


class TestUpdateAppointment:
    def test_reschedule_and_clear_location(self, db, make_appointment):
        appointment = make_appointment(location="Chambers, 4th floor")
        updated = AppointmentService(db).update({
            "id": appointment.id,
            "scheduled_date": datetime(2026, 11, 3, 14, 0),
            "location": None,
        })
        assert updated.scheduled_date == datetime(2026, 11, 3, 14, 0)
        assert updated.location is None
        assert updated.title == "Initial consultation"

    @pytest.mark.parametrize("outcome", ["completed", "cancelled", "no_show"])
    def test_outcomes_are_terminal(self, db, make_appointment, outcome):
        appointment = make_appointment()
        service = AppointmentService(db)
        assert service.update({"id": appointment.id, "status": outcome}).status == outcome
        with pytest.raises(InvalidTransitionError):
            service.update({"id": appointment.id, "status": "scheduled"})

    def test_update_duration_must_be_positive(self, db, make_appointment):
        appointment = make_appointment()
        with pytest.raises(InvalidValueError):
            AppointmentService(db).update({"id": appointment.id, "duration_minutes": 0})


class TestAppointmentLookups:
    def test_by_client_and_lawyer(self, db, make_appointment, make_client, make_lawyer, client, lawyer):
        other_client = make_client()
        other_lawyer = make_lawyer()
        a = make_appointment()
        b = make_appointment(client_id=other_client.id)
        c = make_appointment(lawyer_id=other_lawyer.id)
        service = AppointmentService(db)
        assert [x.id for x in service.get_by_client(client.id)] == [a.id, c.id]
        assert [x.id for x in service.get_by_lawyer(lawyer.id)] == [a.id, b.id]
        assert service.get_by_lawyer(other_lawyer.id)[0].id == c.id
