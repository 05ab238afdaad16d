"""Service-layer errors.

These signal misuse of a service, not business outcomes. Missing dates,
unknown ids and simulated processing failures are reported through return
values instead.
"""


class StayHubError(Exception):
    """Base error for StayHub services."""
    pass
