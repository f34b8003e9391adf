"""Appointment model definitions."""

from datetime import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dental_scheduler.models.policy import SchedulingPolicy


class SchedulingError(str, Enum):
    """Reasons a booking request is turned down, in the order they are checked."""
    OUTSIDE_WORKING_HOURS = 'outside_working_hours'
    DURING_LUNCH = 'during_lunch'
    CONFLICT = 'conflict'

    def describe(self, policy: SchedulingPolicy) -> str:
        name = policy.practitioner_name
        if self is SchedulingError.OUTSIDE_WORKING_HOURS:
            return (
                f'{name} only sees patients between '
                f'{policy.work_start:%H:%M} and {policy.work_end:%H:%M}.'
            )
        if self is SchedulingError.DURING_LUNCH:
            return (
                f'{policy.lunch_start:%H:%M} to {policy.lunch_end:%H:%M} '
                f'is reserved for lunch.'
            )
        return 'This time is already booked.'


class AppointmentInterval(BaseModel):
    """Represents a booked appointment as a half-open [start, end) interval."""
    model_config = ConfigDict(frozen=True)

    start: time
    end: time

    @model_validator(mode='after')
    def validate_bounds(self) -> 'AppointmentInterval':
        if self.start >= self.end:
            raise ValueError('Appointment must start before it ends.')
        return self

    def __str__(self) -> str:
        return f'{self.start:%H:%M} - {self.end:%H:%M}'


class BookingRequest(BaseModel):
    hour: int = Field(ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)

    def to_time(self) -> time:
        return time(self.hour, self.minute)


class BookingResult(BaseModel):
    """Outcome of a booking request: the new appointment, or why it was refused."""
    model_config = ConfigDict(frozen=True)

    appointment: AppointmentInterval | None = None
    error: SchedulingError | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
