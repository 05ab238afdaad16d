"""
Runtime Environment Validation Module

Validates the simulated-processing and CORS configuration at application
startup. If validation fails, the application refuses to start (hard fail).
"""

import sys
from typing import Optional

from pydantic import ValidationError

from stayhub.core.config import Settings


def validate_environment(settings: Optional[Settings] = None) -> Settings:
    """
    Validate configuration before the FastAPI app starts.

    Returns:
        Settings: Validated settings object

    Raises:
        SystemExit: If validation fails (exit code 1)
    """

    try:
        settings = settings or Settings()

        # 1. CORS: wildcard only allowed in debug mode
        if not settings.debug and "*" in settings.origins:
            print(
                "❌ FATAL: Wildcard CORS origin (*) detected outside debug mode.",
                file=sys.stderr
            )
            print(
                "   Set ALLOWED_ORIGINS to specific domains (comma-separated).",
                file=sys.stderr
            )
            sys.exit(1)

        # 2. Simulated delays
        for name in ("auth_delay_seconds", "booking_delay_seconds"):
            if getattr(settings, name) < 0:
                print(f"❌ FATAL: {name.upper()} must not be negative", file=sys.stderr)
                sys.exit(1)

        # 3. Failure injection
        if not 0.0 <= settings.booking_failure_rate <= 1.0:
            print(
                f"❌ FATAL: BOOKING_FAILURE_RATE must be between 0 and 1, got {settings.booking_failure_rate}",
                file=sys.stderr
            )
            sys.exit(1)

        # 4. Timeout
        if settings.call_timeout_seconds <= 0:
            print("❌ FATAL: CALL_TIMEOUT_SECONDS must be positive", file=sys.stderr)
            sys.exit(1)

        print("✅ Environment validation passed")
        print(f"   App: {settings.app_name}")
        print(f"   Debug: {settings.debug}")
        print(f"   CORS Origins: {settings.allowed_origins}")

        return settings

    except ValidationError as e:
        print("❌ FATAL: Environment validation failed", file=sys.stderr)
        print("\nMissing or invalid environment variables:", file=sys.stderr)
        for error in e.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            msg = error["msg"]
            print(f"   • {field}: {msg}", file=sys.stderr)

        print("\nThe application cannot start with invalid configuration.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    validate_environment()
    print("\n✅ All environment variables are valid!")
