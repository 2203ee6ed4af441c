from typing import Protocol, runtime_checkable

import requests


class CredentialProvider(Protocol):
    def get_authorized_session(self) -> requests.Session:
        """HTTP session that attaches valid bearer credentials to outgoing requests."""
        ...


@runtime_checkable
class StepsProvider(Protocol):
    def get_daily_steps(self) -> int:
        """Total steps taken between local midnight and now."""
        ...
