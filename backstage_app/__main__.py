"""Process entry point — `python -m backstage_app` or the `backstage-app` script.

Runs a single long-lived uvicorn server in the foreground. Configuration is
environment-only (PORT, HOST, ENVIRONMENT, LOG_LEVEL, ...); there are no flags.
"""

import uvicorn

from backstage_app.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "backstage_app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
