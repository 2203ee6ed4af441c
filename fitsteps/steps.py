"""
Google Fit CLI tool for printing today's step count.
"""

import sys

from .config import configure_logging, load_settings
from .errors import StepCountError
from .google_fit_client import create_google_fit_client
from .interfaces import StepsProvider
from .oauth_manager import create_oauth_manager


def main() -> None:
    """Main entry point: authenticate, fetch today's steps, print them."""
    try:
        configure_logging()
        settings = load_settings()
        client: StepsProvider = create_google_fit_client(create_oauth_manager(settings))
        steps = client.get_daily_steps()
    except StepCountError as e:
        print(f"❌ Failed to retrieve steps ({e.stage}): {e}", file=sys.stderr)
        sys.exit(e.exit_code)

    print(f"You have taken {steps} steps today!")


if __name__ == "__main__":
    main()
