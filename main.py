"""support-logging server — accepts, searches and deletes structured log records."""

import logging

from support_logging.config import Config
from support_logging.web import create_app


def main():
    config = Config.from_env()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = create_app(config)
    server = config["server"]
    logging.info(
        "Starting support-logging on %s:%d (storage=%s, max_limit=%d)",
        server["host"], server["port"],
        config["storage"]["backend"], config["read"]["max_limit"],
    )
    app.run(host=server["host"], port=server["port"], debug=server["debug"],
            use_reloader=False)


if __name__ == "__main__":
    main()
