from datetime import time

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from dental_scheduler.models.appointment import AppointmentInterval, BookingRequest, SchedulingError
from dental_scheduler.scheduler import Scheduler

router = APIRouter(tags=['appointments'])

ERROR_STATUS_CODES = {
    SchedulingError.OUTSIDE_WORKING_HOURS: status.HTTP_400_BAD_REQUEST,
    SchedulingError.DURING_LUNCH: status.HTTP_400_BAD_REQUEST,
    SchedulingError.CONFLICT: status.HTTP_409_CONFLICT,
}


class AppointmentResponse(BaseModel):
    start_time: time
    end_time: time
    duration_minutes: int
    practitioner: str


class AvailableStartResponse(BaseModel):
    start_time: time


def get_scheduler(request: Request) -> Scheduler:
    return request.app.state.scheduler


def to_response(appointment: AppointmentInterval, scheduler: Scheduler) -> AppointmentResponse:
    return AppointmentResponse(
        start_time=appointment.start,
        end_time=appointment.end,
        duration_minutes=scheduler.policy.appointment_duration_minutes,
        practitioner=scheduler.policy.practitioner_name,
    )


@router.get('/appointments', response_model=list[AppointmentResponse])
def list_appointments(scheduler: Scheduler = Depends(get_scheduler)):
    return [to_response(appointment, scheduler) for appointment in scheduler.list_booked_intervals()]


@router.get('/appointments/available', response_model=list[AvailableStartResponse])
def list_available_starts(scheduler: Scheduler = Depends(get_scheduler)):
    return [AvailableStartResponse(start_time=start) for start in scheduler.available_starts()]


@router.post('/appointments', response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(data: BookingRequest, scheduler: Scheduler = Depends(get_scheduler)):
    result = scheduler.book_appointment(data.to_time())

    if not result.ok:
        raise HTTPException(
            status_code=ERROR_STATUS_CODES[result.error],
            detail=result.reason,
        )

    return to_response(result.appointment, scheduler)
