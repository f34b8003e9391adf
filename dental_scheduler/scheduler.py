"""Availability checks and the booking set for a single practitioner.

A request is checked against the working hours first, then the lunch break,
then every appointment already booked. All intervals are half-open
``[start, end)``: two intervals collide when ``start < other_end`` and
``other_start < end``, so back-to-back appointments are allowed and the same
rule decides both lunch and booking conflicts.
"""

import logging
from datetime import time
from threading import Lock
from typing import Iterator

from dental_scheduler.models.appointment import AppointmentInterval, BookingResult, SchedulingError
from dental_scheduler.models.policy import SchedulingPolicy, minutes_of_day, time_from_minutes

logger = logging.getLogger(__name__)


def intervals_overlap(start: int, end: int, other_start: int, other_end: int) -> bool:
    return start < other_end and other_start < end


def _normalize(requested_start: time) -> time:
    if requested_start.tzinfo is not None:
        raise ValueError('Requested times must not carry a timezone.')
    return requested_start.replace(second=0, microsecond=0)


class Scheduler:
    """Books fixed-length appointments for one practitioner over one day."""

    def __init__(self, policy: SchedulingPolicy | None = None) -> None:
        self.policy = policy or SchedulingPolicy.from_config()
        self._booked: dict[time, time] = {}
        self._lock = Lock()

    def book_appointment(self, requested_start: time) -> BookingResult:
        requested_start = _normalize(requested_start)

        with self._lock:
            error = self._check(requested_start)
            if error is not None:
                logger.info(
                    'Rejected appointment at %s: %s',
                    requested_start.strftime('%H:%M'),
                    error.value,
                )
                return BookingResult(error=error, reason=error.describe(self.policy))

            start_minutes = minutes_of_day(requested_start)
            requested_end = time_from_minutes(start_minutes + self.policy.appointment_duration_minutes)
            appointment = AppointmentInterval(start=requested_start, end=requested_end)
            self._booked[requested_start] = requested_end

        logger.info('Booked appointment %s with %s', appointment, self.policy.practitioner_name)
        return BookingResult(appointment=appointment)

    def is_available(self, requested_start: time) -> SchedulingError | None:
        with self._lock:
            return self._check(_normalize(requested_start))

    def list_booked_intervals(self) -> Iterator[AppointmentInterval]:
        with self._lock:
            snapshot = sorted(self._booked.items())

        for start, end in snapshot:
            yield AppointmentInterval(start=start, end=end)

    def available_starts(self, step_minutes: int | None = None) -> list[time]:
        step = step_minutes if step_minutes is not None else self.policy.appointment_duration_minutes
        if step <= 0:
            raise ValueError('Step must be a positive number of minutes.')

        last_start = self.policy.work_end_minutes - self.policy.appointment_duration_minutes
        starts: list[time] = []

        with self._lock:
            current = self.policy.work_start_minutes
            while current <= last_start:
                candidate = time_from_minutes(current)
                if self._check(candidate) is None:
                    starts.append(candidate)
                current += step

        return starts

    def _check(self, requested_start: time) -> SchedulingError | None:
        policy = self.policy
        start = minutes_of_day(requested_start)
        end = start + policy.appointment_duration_minutes

        if start < policy.work_start_minutes or end > policy.work_end_minutes:
            return SchedulingError.OUTSIDE_WORKING_HOURS

        if intervals_overlap(start, end, policy.lunch_start_minutes, policy.lunch_end_minutes):
            return SchedulingError.DURING_LUNCH

        for booked_start, booked_end in self._booked.items():
            if intervals_overlap(start, end, minutes_of_day(booked_start), minutes_of_day(booked_end)):
                return SchedulingError.CONFLICT

        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._booked)
