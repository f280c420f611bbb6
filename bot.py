# bot.py

import logging
import re

from telegram.ext import (
    ApplicationBuilder, CommandHandler, ConversationHandler,
    MessageHandler, filters,
)

from handlers import (
    MENU, CHOOSE_AQUARIUM,
    ADD_AQUARIUM_NAME, ADD_AQUARIUM_TYPE, ADD_AQUARIUM_SUBTYPE, ADD_AQUARIUM_VOLUME,
    AQUARIUM_MENU, PARAM_CHOOSE, PARAM_VALUE,
    SETTINGS, EDIT_NAME, EDIT_VOLUME, CONFIRM_DELETE,
    READINGS_LIST, CONFIRM_READING_DELETE,
)

import config
from messages import t

from handlers.base import start, menu
from handlers.aquarium import (
    show_aquariums, choose_aquarium,
    add_aquarium_start, add_aquarium_name,
    add_aquarium_type, add_aquarium_subtype, add_aquarium_volume
)
from handlers.measurement import aquarium_menu_handler, param_choose, param_value
from handlers.history import reading_choose_handler, confirm_reading_delete_handler
from handlers.settings import (
    edit_name_handler, set_name_handler,
    edit_volume_handler, set_volume_handler,
    delete_aquarium_handler, confirm_delete_handler,
    settings_back_handler, settings_cancel_action
)

logger = logging.getLogger(__name__)

def button(key):
    """Filter matching a translated keyboard button exactly."""
    return filters.Regex(f"^{re.escape(t(key, config.LANGUAGE))}$")

async def error_handler(update, context):
    logger.error("Update %s caused an error", update, exc_info=context.error)

def get_app():
    if not config.TELEGRAM_TOKEN:
        raise RuntimeError("TELEGRAM_TOKEN is not set")
    app = ApplicationBuilder().token(config.TELEGRAM_TOKEN).build()

    conv = ConversationHandler(
        entry_points=[CommandHandler("start", start)],
        states={
            MENU: [
                MessageHandler(button("bot.myAquariums"), show_aquariums),
                MessageHandler(button("bot.addAquarium"), add_aquarium_start),
                MessageHandler(filters.TEXT, menu),
            ],
            CHOOSE_AQUARIUM: [MessageHandler(filters.TEXT, choose_aquarium)],
            ADD_AQUARIUM_NAME: [MessageHandler(filters.TEXT, add_aquarium_name)],
            ADD_AQUARIUM_TYPE: [MessageHandler(filters.TEXT, add_aquarium_type)],
            ADD_AQUARIUM_SUBTYPE: [MessageHandler(filters.TEXT, add_aquarium_subtype)],
            ADD_AQUARIUM_VOLUME: [MessageHandler(filters.TEXT, add_aquarium_volume)],
            AQUARIUM_MENU: [MessageHandler(filters.TEXT, aquarium_menu_handler)],
            PARAM_CHOOSE: [MessageHandler(filters.TEXT, param_choose)],
            PARAM_VALUE: [MessageHandler(filters.TEXT, param_value)],
            SETTINGS: [
                MessageHandler(button("bot.back"), settings_back_handler),
                MessageHandler(button("bot.rename"), edit_name_handler),
                MessageHandler(button("bot.changeVolume"), edit_volume_handler),
                MessageHandler(button("bot.delete"), delete_aquarium_handler),
            ],
            EDIT_NAME: [
                MessageHandler(button("bot.cancel"), settings_cancel_action),
                MessageHandler(filters.TEXT, set_name_handler)
            ],
            EDIT_VOLUME: [
                MessageHandler(button("bot.cancel"), settings_cancel_action),
                MessageHandler(filters.TEXT, set_volume_handler)
            ],
            CONFIRM_DELETE: [MessageHandler(filters.TEXT, confirm_delete_handler)],
            READINGS_LIST: [MessageHandler(filters.TEXT, reading_choose_handler)],
            CONFIRM_READING_DELETE: [MessageHandler(filters.TEXT, confirm_reading_delete_handler)],
        },
        fallbacks=[MessageHandler(filters.COMMAND, start)],
        allow_reentry=True,
    )

    app.add_handler(conv)
    app.add_handler(CommandHandler("menu", menu))
    app.add_error_handler(error_handler)
    return app
