"""Scheduling policy definitions."""

from datetime import time

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from dental_scheduler.core import config

MINUTES_PER_DAY = 24 * 60


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def time_from_minutes(minutes: int) -> time:
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f'{minutes} minutes is not a time of day.')
    return time(minutes // 60, minutes % 60)


class SchedulingPolicy(BaseModel):
    """Working window, lunch closure and appointment length for one practitioner."""
    model_config = ConfigDict(frozen=True, validate_default=True)

    work_start: time = time(8, 0)
    work_end: time = time(17, 0)
    lunch_start: time = time(12, 0)
    lunch_end: time = time(13, 0)
    appointment_duration_minutes: int = 60
    practitioner_name: str = 'Dentist'

    @classmethod
    def from_config(cls) -> 'SchedulingPolicy':
        """Build the policy from the environment settings in ``core.config``.

        Malformed values raise ``pydantic.ValidationError`` here rather than
        when the config module is imported.
        """
        return cls(
            work_start=config.WORK_START,
            work_end=config.WORK_END,
            lunch_start=config.LUNCH_START,
            lunch_end=config.LUNCH_END,
            appointment_duration_minutes=config.APPOINTMENT_DURATION_MINUTES,
            practitioner_name=config.PRACTITIONER_NAME,
        )

    @field_validator('work_start', 'work_end', 'lunch_start', 'lunch_end', mode='before')
    @classmethod
    def parse_time_of_day(cls, value):
        # Accepts "H", "HH:MM" as well as time objects.
        if isinstance(value, str):
            hour, _, minute = value.strip().partition(':')
            return time(int(hour), int(minute or 0))
        return value

    @field_validator('work_start', 'work_end', 'lunch_start', 'lunch_end')
    @classmethod
    def validate_minute_precision(cls, value: time) -> time:
        if value.second or value.microsecond:
            raise ValueError('Policy times must be whole minutes.')
        if value.tzinfo is not None:
            raise ValueError('Policy times must not carry a timezone.')
        return value

    @field_validator('practitioner_name')
    @classmethod
    def validate_practitioner_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Practitioner name is required.')
        return normalized

    @model_validator(mode='after')
    def validate_windows(self) -> 'SchedulingPolicy':
        if self.work_start >= self.work_end:
            raise ValueError('Working hours must start before they end.')

        if self.lunch_start >= self.lunch_end:
            raise ValueError('Lunch break must start before it ends.')

        if self.lunch_start < self.work_start or self.lunch_end > self.work_end:
            raise ValueError('Lunch break must fall within working hours.')

        working_minutes = minutes_of_day(self.work_end) - minutes_of_day(self.work_start)
        if not 0 < self.appointment_duration_minutes <= working_minutes:
            raise ValueError(f'Appointment duration must be between 1 and {working_minutes} minutes.')

        return self

    @property
    def work_start_minutes(self) -> int:
        return minutes_of_day(self.work_start)

    @property
    def work_end_minutes(self) -> int:
        return minutes_of_day(self.work_end)

    @property
    def lunch_start_minutes(self) -> int:
        return minutes_of_day(self.lunch_start)

    @property
    def lunch_end_minutes(self) -> int:
        return minutes_of_day(self.lunch_end)
