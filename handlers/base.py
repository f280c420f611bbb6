# handlers/base.py

from telegram import Update
from telegram.ext import ContextTypes
from config import LANGUAGE
from messages import t
from utils.keyboards import main_menu
from handlers import MENU

async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(t("bot.welcome", LANGUAGE), reply_markup=main_menu())
    return MENU

async def menu(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(t("bot.mainMenu", LANGUAGE), reply_markup=main_menu())
    return MENU
