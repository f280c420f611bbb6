# handlers/measurement.py

import logging

from telegram import Update
from telegram.ext import ContextTypes
from config import LANGUAGE
from db import Session, Measurement
from messages import t, param_name
from status import compare
from utils.helpers import get_evaluator, parse_number, now, fmt
from utils.keyboards import aquarium_menu, param_keyboard, param_label, cancel_keyboard
from handlers import AQUARIUM_MENU, PARAM_CHOOSE, PARAM_VALUE

logger = logging.getLogger(__name__)

def _range_table(context):
    return get_evaluator().ranges.get_table(context.user_data.get("sub_type"))

async def aquarium_menu_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    txt = update.message.text
    if txt == t("bot.addReading", LANGUAGE):
        table = _range_table(context)
        if not table:
            await update.message.reply_text(t("status.undefinedRanges", LANGUAGE), reply_markup=aquarium_menu())
            return AQUARIUM_MENU
        await update.message.reply_text(t("bot.chooseParam", LANGUAGE), reply_markup=param_keyboard(table))
        return PARAM_CHOOSE
    if txt == t("bot.status", LANGUAGE):
        from handlers.advice import advice_handler
        return await advice_handler(update, context)
    if txt == t("bot.readings", LANGUAGE):
        from handlers.history import readings_menu_handler
        return await readings_menu_handler(update, context)
    if txt == t("bot.settings", LANGUAGE):
        from handlers.settings import settings_menu_handler
        return await settings_menu_handler(update, context)
    if txt == t("bot.back", LANGUAGE):
        from handlers.base import menu
        return await menu(update, context)
    await update.message.reply_text(t("bot.chooseAction", LANGUAGE), reply_markup=aquarium_menu())
    return AQUARIUM_MENU

async def param_choose(update: Update, context: ContextTypes.DEFAULT_TYPE):
    txt = update.message.text
    if txt == t("bot.cancel", LANGUAGE):
        return await aquarium_menu_handler(update, context)
    table = _range_table(context) or {}
    entry = next((e for e in table.values() if param_label(e) == txt or e.key == txt), None)
    if entry is None:
        await update.message.reply_text(t("bot.chooseParamButton", LANGUAGE))
        return PARAM_CHOOSE
    context.user_data["param_name"] = entry.key
    await update.message.reply_text(
        t("bot.askValue", LANGUAGE, name=param_name(entry.key, LANGUAGE),
          min=fmt(entry.min), max=fmt(entry.max), unit=entry.unit),
        reply_markup=cancel_keyboard()
    )
    return PARAM_VALUE

async def param_value(update: Update, context: ContextTypes.DEFAULT_TYPE):
    txt = update.message.text
    if txt == t("bot.cancel", LANGUAGE):
        await update.message.reply_text(t("bot.chooseAction", LANGUAGE), reply_markup=aquarium_menu())
        return AQUARIUM_MENU
    # NaN / inf never reach the database or the evaluator
    val = parse_number(txt)
    if val is None:
        await update.message.reply_text(t("bot.invalidNumber", LANGUAGE))
        return PARAM_VALUE

    aq_id = context.user_data["aquarium_id"]
    key = context.user_data.pop("param_name")
    with Session() as session:
        session.add(Measurement(aquarium_id=aq_id, param=key, value=val, created_at=now()))
        session.commit()
    logger.info("Stored %s=%s for aquarium %s", key, val, aq_id)

    entry = _range_table(context)[key]
    direction = compare(val, entry)
    mark = "✅" if direction is None else "🚨"
    await update.message.reply_text(
        t("bot.readingSaved", LANGUAGE, name=param_name(key, LANGUAGE), value=fmt(val), mark=mark,
          min=fmt(entry.min), max=fmt(entry.max), unit=entry.unit),
        reply_markup=aquarium_menu()
    )

    # advice right away when the new value is out of range
    if direction is not None:
        advice = get_evaluator().recommendations.get_advice(key, direction, context.user_data.get("main_type"))
        if advice:
            await update.message.reply_text(advice)
    return AQUARIUM_MENU
