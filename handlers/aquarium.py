# handlers/aquarium.py

import logging

from telegram import ReplyKeyboardMarkup, KeyboardButton, Update
from telegram.ext import ContextTypes
from config import LANGUAGE
from db import Session, Aquarium
from messages import t
from parameters import SUB_TYPES
from types_map import classify_main_type
from utils.helpers import parse_number, fmt
from utils.keyboards import (
    main_menu, aquarium_menu, cancel_keyboard, main_type_keyboard, sub_type_keyboard,
)
from handlers import (
    MENU, CHOOSE_AQUARIUM,
    ADD_AQUARIUM_NAME, ADD_AQUARIUM_TYPE, ADD_AQUARIUM_SUBTYPE, ADD_AQUARIUM_VOLUME,
    AQUARIUM_MENU,
)
from handlers.base import menu

logger = logging.getLogger(__name__)

def _is_cancel(text):
    return text.strip().lower() in (t("bot.cancel", LANGUAGE).lower(), t("bot.back", LANGUAGE).lower())

def _match_label(text, prefix, keys):
    """Button text -> key whose translated label matches it."""
    text = text.strip().lower()
    for key in keys:
        if t(f"{prefix}.{key}", LANGUAGE).lower() == text or key.lower() == text:
            return key
    return None

def remember_aquarium(context, aq):
    context.user_data["aquarium_id"] = aq.id
    context.user_data["sub_type"] = aq.sub_type
    context.user_data["main_type"] = classify_main_type(aq).value

def aquarium_header(aq):
    sub_type = t(f"subType.{aq.sub_type}", LANGUAGE) if aq.sub_type else "?"
    return t("bot.aquariumHeader", LANGUAGE, name=aq.name, sub_type=sub_type, volume=fmt(aq.volume or 0))

async def show_aquariums(update: Update, context: ContextTypes.DEFAULT_TYPE):
    with Session() as session:
        aquas = session.query(Aquarium).filter_by(user_id=update.effective_user.id).all()
        buttons = [[KeyboardButton(f"{a.id}: {a.name}")] for a in aquas]
    if not buttons:
        await update.message.reply_text(t("bot.noAquariums", LANGUAGE), reply_markup=main_menu())
        return MENU

    buttons.append([KeyboardButton(t("bot.back", LANGUAGE))])
    await update.message.reply_text(
        t("bot.aquariumList", LANGUAGE), reply_markup=ReplyKeyboardMarkup(buttons, resize_keyboard=True)
    )
    return CHOOSE_AQUARIUM

async def choose_aquarium(update: Update, context: ContextTypes.DEFAULT_TYPE):
    text = update.message.text
    if _is_cancel(text):
        return await menu(update, context)
    try:
        aq_id = int(text.split(":")[0])
    except ValueError:
        await update.message.reply_text(t("bot.chooseAquarium", LANGUAGE))
        return CHOOSE_AQUARIUM

    with Session() as session:
        aq = session.get(Aquarium, aq_id)
        if not aq or aq.user_id != update.effective_user.id:
            await update.message.reply_text(t("bot.aquariumNotFound", LANGUAGE))
            return CHOOSE_AQUARIUM
        remember_aquarium(context, aq)
        header = aquarium_header(aq)

    await update.message.reply_text(header, reply_markup=aquarium_menu())
    return AQUARIUM_MENU

async def add_aquarium_start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(t("bot.askName", LANGUAGE), reply_markup=cancel_keyboard())
    return ADD_AQUARIUM_NAME

async def add_aquarium_name(update: Update, context: ContextTypes.DEFAULT_TYPE):
    txt = update.message.text.strip()
    if _is_cancel(txt):
        return await menu(update, context)
    context.user_data["new_aq_name"] = txt
    await update.message.reply_text(t("bot.askMainType", LANGUAGE), reply_markup=main_type_keyboard())
    return ADD_AQUARIUM_TYPE

async def add_aquarium_type(update: Update, context: ContextTypes.DEFAULT_TYPE):
    txt = update.message.text
    if _is_cancel(txt):
        return await menu(update, context)
    main_type = _match_label(txt, "mainType", SUB_TYPES)
    if main_type is None:
        await update.message.reply_text(t("bot.askMainType", LANGUAGE), reply_markup=main_type_keyboard())
        return ADD_AQUARIUM_TYPE
    context.user_data["new_aq_type"] = main_type
    await update.message.reply_text(t("bot.askSubType", LANGUAGE), reply_markup=sub_type_keyboard(main_type))
    return ADD_AQUARIUM_SUBTYPE

async def add_aquarium_subtype(update: Update, context: ContextTypes.DEFAULT_TYPE):
    txt = update.message.text
    if _is_cancel(txt):
        return await menu(update, context)
    main_type = context.user_data["new_aq_type"]
    sub_type = _match_label(txt, "subType", SUB_TYPES[main_type])
    if sub_type is None:
        await update.message.reply_text(t("bot.askSubType", LANGUAGE), reply_markup=sub_type_keyboard(main_type))
        return ADD_AQUARIUM_SUBTYPE
    context.user_data["new_aq_subtype"] = sub_type
    await update.message.reply_text(t("bot.askVolume", LANGUAGE), reply_markup=cancel_keyboard())
    return ADD_AQUARIUM_VOLUME

async def add_aquarium_volume(update: Update, context: ContextTypes.DEFAULT_TYPE):
    txt = update.message.text
    if _is_cancel(txt):
        return await menu(update, context)
    vol = parse_number(txt)
    if vol is None or vol <= 0:
        await update.message.reply_text(t("bot.invalidVolume", LANGUAGE))
        return ADD_AQUARIUM_VOLUME

    with Session() as session:
        aq = Aquarium(
            user_id=update.effective_user.id,
            name=context.user_data.pop("new_aq_name"),
            main_type=context.user_data.pop("new_aq_type"),
            sub_type=context.user_data.pop("new_aq_subtype"),
            volume=vol
        )
        session.add(aq)
        session.commit()
        name = aq.name
        logger.info("Aquarium %s created (%s/%s) by user %s", aq.id, aq.main_type, aq.sub_type, aq.user_id)
    await update.message.reply_text(t("bot.aquariumAdded", LANGUAGE, name=name), reply_markup=main_menu())
    return MENU
