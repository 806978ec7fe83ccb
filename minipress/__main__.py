"""Run the application with uvicorn: ``python -m minipress``."""

import uvicorn

from minipress.config import get_settings


def main() -> None:
    """Serve the app, terminating TLS when a key and certificate are configured."""
    settings = get_settings()
    uvicorn.run(
        "minipress.main:app",
        host=settings.host,
        port=settings.port,
        ssl_keyfile=str(settings.ssl_private_key) if settings.ssl_private_key else None,
        ssl_certfile=str(settings.ssl_certificate_chain) if settings.ssl_certificate_chain else None,
        proxy_headers=True,
        log_config=None,
    )


if __name__ == "__main__":
    main()
