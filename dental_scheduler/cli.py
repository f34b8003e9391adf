"""Interactive booking menu for the dentist's day.

Usage:
    python -m dental_scheduler.cli
"""
import logging
import sys
from typing import Callable

from pydantic import ValidationError

from dental_scheduler.core import config
from dental_scheduler.models.appointment import BookingRequest
from dental_scheduler.scheduler import Scheduler

# Exit keeps its original number 3 and is listed last.
MENU = """
1. Show booked appointments
2. Book an appointment
4. Show free times
3. Exit
"""

InputFunc = Callable[[str], str]


def read_int(prompt: str, input_func: InputFunc) -> int | None:
    raw = input_func(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        print(f"'{raw}' is not a number.")
        return None


def print_appointments(scheduler: Scheduler) -> None:
    appointments = list(scheduler.list_booked_intervals())
    if not appointments:
        print('No appointments booked yet.')
        return

    print(f'Appointments with {scheduler.policy.practitioner_name}:')
    for appointment in appointments:
        print(f'  {appointment}')


def print_available_starts(scheduler: Scheduler) -> None:
    starts = scheduler.available_starts()
    if not starts:
        print('No free times left today.')
        return

    print('Free times: ' + ', '.join(f'{start:%H:%M}' for start in starts))


def request_booking(scheduler: Scheduler, input_func: InputFunc) -> None:
    hour = read_int('Hour (0-23): ', input_func)
    if hour is None:
        return
    minute = read_int('Minute (0-59): ', input_func)
    if minute is None:
        return

    try:
        request = BookingRequest(hour=hour, minute=minute)
    except ValidationError:
        print(f'{hour}:{minute:02d} is not a valid time of day.')
        return

    result = scheduler.book_appointment(request.to_time())
    if result.ok:
        print(f'Appointment scheduled at {result.appointment.start:%H:%M}')
    else:
        print(f'Unable to schedule appointment: {result.reason}')


def run_menu(scheduler: Scheduler, input_func: InputFunc = input) -> None:
    while True:
        print(MENU)
        try:
            choice = read_int('Choose an option: ', input_func)
            if choice == 1:
                print_appointments(scheduler)
            elif choice == 2:
                request_booking(scheduler, input_func)
            elif choice == 3:
                print('Goodbye.')
                return
            elif choice == 4:
                print_available_starts(scheduler)
            elif choice is not None:
                print(f'Unknown option: {choice}')
        except (EOFError, KeyboardInterrupt):
            print('\nGoodbye.')
            return


def main() -> None:
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.WARNING))

    try:
        scheduler = Scheduler()
    except ValueError as exc:
        print(f'Invalid scheduling configuration: {exc}', file=sys.stderr)
        sys.exit(1)

    run_menu(scheduler)


if __name__ == "__main__":
    main()
