import logging

import uvicorn

from utils.logger import setup_logging
setup_logging()

from utils.config_loader import load_config


def main():
    cfg = load_config()
    server = cfg.get("server", {})
    host = server.get("host", "0.0.0.0")
    port = int(server.get("port", 3000))

    logging.info(f"[CORE] CookTime listening at http://{host}:{port}")
    uvicorn.run("api.app:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
