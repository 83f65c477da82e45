import os

import click
import uvicorn
from dotenv import load_dotenv

from keyqueue.logging_config import get_logging_config
from keyqueue.modules.api.models import BackendKind
from keyqueue.modules.config import get_config, reset_config

load_dotenv()


@click.command()
@click.option("--host", "host", default=None, help="Bind address (default: API_HOST)")
@click.option("--port", "port", type=int, default=None, help="Port (default: API_PORT)")
@click.option(
    "--backend",
    "backend",
    type=click.Choice([kind.value for kind in BackendKind]),
    default=None,
    help="Queue backend (default: QUEUE_BACKEND)",
)
def main(host, port, backend):
    # Overrides go through the environment so a reloading worker sees them too
    if host:
        os.environ["API_HOST"] = host
    if port:
        os.environ["API_PORT"] = str(port)
    if backend:
        os.environ["QUEUE_BACKEND"] = backend
    reset_config()
    config = get_config()

    uvicorn.run(
        "keyqueue.main:app",
        host=config.get("host"),
        port=config.get("port"),
        log_level=config.get("log_level").lower(),
        reload=config.get("debug"),
        log_config=get_logging_config(config.get("log_level")),
    )


if __name__ == "__main__":
    main()
