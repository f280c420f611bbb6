# main.py

import logging
from threading import Thread

import config
from db import init_db


def run_flask():
    from web import app as flask_app
    flask_app.run(port=config.WEB_PORT)

if __name__ == "__main__":
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.LOG_LEVEL,
    )
    # httpx logs every getUpdates poll at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    init_db()

    from bot import get_app
    Thread(target=run_flask, daemon=True).start()
    application = get_app()
    application.run_polling()
