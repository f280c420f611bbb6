# handlers/settings.py

import logging

from telegram import Update
from telegram.ext import ContextTypes
from config import LANGUAGE
from db import Session, Aquarium
from messages import t
from utils.helpers import parse_number
from utils.keyboards import aquarium_menu, main_menu, setting_keyboard, cancel_keyboard, confirm_keyboard
from handlers import SETTINGS, EDIT_NAME, EDIT_VOLUME, CONFIRM_DELETE, MENU, AQUARIUM_MENU

logger = logging.getLogger(__name__)

async def settings_menu_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(t("bot.settingsMenu", LANGUAGE), reply_markup=setting_keyboard())
    return SETTINGS

async def settings_back_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(t("bot.chooseAction", LANGUAGE), reply_markup=aquarium_menu())
    return AQUARIUM_MENU

async def settings_cancel_action(update: Update, context: ContextTypes.DEFAULT_TYPE):
    return await settings_menu_handler(update, context)

async def edit_name_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(t("bot.askNewName", LANGUAGE), reply_markup=cancel_keyboard())
    return EDIT_NAME

async def set_name_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    aq_id = context.user_data.get("aquarium_id")
    if not aq_id:
        await update.message.reply_text(t("bot.noAquariumSelected", LANGUAGE))
        return SETTINGS
    new_name = update.message.text.strip()
    if not new_name:
        await update.message.reply_text(t("bot.askNewName", LANGUAGE))
        return EDIT_NAME
    with Session() as session:
        aq = session.get(Aquarium, aq_id)
        if aq is None:
            # deleted from another chat
            context.user_data.pop("aquarium_id", None)
            await update.message.reply_text(t("bot.aquariumNotFound", LANGUAGE), reply_markup=main_menu())
            return MENU
        aq.name = new_name
        session.commit()
    await update.message.reply_text(t("bot.nameChanged", LANGUAGE), reply_markup=setting_keyboard())
    return SETTINGS

async def edit_volume_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(t("bot.askNewVolume", LANGUAGE), reply_markup=cancel_keyboard())
    return EDIT_VOLUME

async def set_volume_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    aq_id = context.user_data.get("aquarium_id")
    if not aq_id:
        await update.message.reply_text(t("bot.noAquariumSelected", LANGUAGE))
        return SETTINGS
    vol = parse_number(update.message.text)
    if vol is None or vol <= 0:
        await update.message.reply_text(t("bot.invalidVolume", LANGUAGE))
        return EDIT_VOLUME
    with Session() as session:
        aq = session.get(Aquarium, aq_id)
        if aq is None:
            # deleted from another chat
            context.user_data.pop("aquarium_id", None)
            await update.message.reply_text(t("bot.aquariumNotFound", LANGUAGE), reply_markup=main_menu())
            return MENU
        aq.volume = vol
        session.commit()
    await update.message.reply_text(t("bot.volumeChanged", LANGUAGE), reply_markup=setting_keyboard())
    return SETTINGS

async def delete_aquarium_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    aq_id = context.user_data.get("aquarium_id")
    with Session() as session:
        aq = session.get(Aquarium, aq_id) if aq_id else None
        name = aq.name if aq else ""
    await update.message.reply_text(t("bot.confirmDelete", LANGUAGE, name=name), reply_markup=confirm_keyboard())
    return CONFIRM_DELETE

async def confirm_delete_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if update.message.text.strip().lower() != t("bot.yes", LANGUAGE).lower():
        await update.message.reply_text(t("bot.deleteCancelled", LANGUAGE), reply_markup=setting_keyboard())
        return SETTINGS
    aq_id = context.user_data.pop("aquarium_id", None)
    with Session() as session:
        aq = session.get(Aquarium, aq_id) if aq_id else None
        if aq is not None:
            # measurements go with it (cascade)
            session.delete(aq)
            session.commit()
            logger.info("Aquarium %s deleted", aq_id)
    context.user_data.pop("sub_type", None)
    context.user_data.pop("main_type", None)
    await update.message.reply_text(t("bot.deleted", LANGUAGE), reply_markup=main_menu())
    return MENU
