import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")
DEBUG = _get_bool(os.getenv("DEBUG"), default=False)

# Scheduling values stay raw here; SchedulingPolicy.from_config() parses them.
WORK_START = os.getenv("WORK_START", "08:00").strip()
WORK_END = os.getenv("WORK_END", "17:00").strip()
LUNCH_START = os.getenv("LUNCH_START", "12:00").strip()
LUNCH_END = os.getenv("LUNCH_END", "13:00").strip()
APPOINTMENT_DURATION_MINUTES = os.getenv("APPOINTMENT_DURATION_MINUTES", "60").strip()
PRACTITIONER_NAME = os.getenv("PRACTITIONER_NAME", "Dentist")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

CORS_ALLOWED_ORIGINS = _get_list(os.getenv("CORS_ALLOWED_ORIGINS"), ["http://localhost:4200"])


def validate_runtime_config() -> None:
    # Imported here; the policy model reads its environment values from this module.
    from dental_scheduler.models.policy import SchedulingPolicy

    SchedulingPolicy.from_config()
    if APP_ENV.lower() == "production" and DEBUG:
        raise RuntimeError("DEBUG must be disabled in production.")
