# handlers/history.py

import logging

from telegram import Update
from telegram.ext import ContextTypes
from config import LANGUAGE
from db import Session, recent_measurements, delete_measurement
from messages import t
from status import compare
from utils.helpers import get_evaluator
from utils.keyboards import aquarium_menu, readings_keyboard, reading_label, confirm_keyboard
from handlers import AQUARIUM_MENU, READINGS_LIST, CONFIRM_READING_DELETE
from handlers.measurement import aquarium_menu_handler

logger = logging.getLogger(__name__)

RECENT_LIMIT = 10

def _line(m, sub_type):
    entry = get_evaluator().ranges.get_range(sub_type, m.param)
    mark = ""
    if entry is not None and compare(m.value, entry) is not None:
        mark = " 🚨"
    return f"• {reading_label(m)}{mark}"

async def readings_menu_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    aq_id = context.user_data["aquarium_id"]
    sub_type = context.user_data.get("sub_type")
    with Session() as session:
        ms = recent_measurements(session, aq_id, RECENT_LIMIT)
        if not ms:
            await update.message.reply_text(t("bot.noReadings", LANGUAGE), reply_markup=aquarium_menu())
            return AQUARIUM_MENU
        context.user_data["reading_labels"] = {reading_label(m): m.id for m in ms}
        text = "\n".join([t("bot.readingsTitle", LANGUAGE)] + [_line(m, sub_type) for m in ms])
        kb = readings_keyboard(ms)
    await update.message.reply_text(text, reply_markup=kb)
    return READINGS_LIST

async def reading_choose_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    txt = update.message.text
    if txt == t("bot.back", LANGUAGE):
        context.user_data.pop("reading_labels", None)
        return await aquarium_menu_handler(update, context)
    reading_id = context.user_data.get("reading_labels", {}).get(txt)
    if reading_id is None:
        await update.message.reply_text(t("bot.chooseReading", LANGUAGE))
        return READINGS_LIST
    context.user_data["reading_id"] = reading_id
    await update.message.reply_text(
        t("bot.confirmReadingDelete", LANGUAGE, reading=txt), reply_markup=confirm_keyboard()
    )
    return CONFIRM_READING_DELETE

async def confirm_reading_delete_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    reading_id = context.user_data.pop("reading_id", None)
    if update.message.text.strip().lower() != t("bot.yes", LANGUAGE).lower():
        await update.message.reply_text(t("bot.deleteCancelled", LANGUAGE))
        return await readings_menu_handler(update, context)

    aq_id = context.user_data["aquarium_id"]
    with Session() as session:
        deleted = reading_id is not None and delete_measurement(session, aq_id, reading_id)
    if deleted:
        logger.info("Measurement %s of aquarium %s deleted", reading_id, aq_id)
        await update.message.reply_text(t("bot.readingDeleted", LANGUAGE))
    else:
        await update.message.reply_text(t("bot.readingNotFound", LANGUAGE))
    return await readings_menu_handler(update, context)
