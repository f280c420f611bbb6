# handlers/advice.py

from telegram import Update
from telegram.ext import ContextTypes
from config import LANGUAGE
from db import Session, Aquarium, aquarium_record, latest_parameters
from messages import t, render_status
from status import Severity
from utils.helpers import get_evaluator
from utils.keyboards import aquarium_menu
from handlers import AQUARIUM_MENU

SEVERITY_MARKS = {
    Severity.NEUTRAL: "⚪",
    Severity.UNDEFINED_RANGES: "🔵",
    Severity.STABLE: "🟢",
    Severity.ALERT: "🔴",
}

def format_status(result, language=LANGUAGE):
    lines = [f"{SEVERITY_MARKS[result.severity]} {render_status(result, language)}"]
    if result.recommendations:
        lines.append("")
        lines.append(f"<b>{t('advice.title', language)}</b>")
        lines.extend(f"• {rec}" for rec in result.recommendations)
    return "\n".join(lines)

async def advice_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    aquarium_id = context.user_data["aquarium_id"]
    with Session() as session:
        aq = session.get(Aquarium, aquarium_id)
        if aq is None:
            await update.message.reply_text(t("bot.aquariumNotFound", LANGUAGE), reply_markup=aquarium_menu())
            return AQUARIUM_MENU
        record = aquarium_record(aq)
        latest = latest_parameters(session, aquarium_id)

    result = get_evaluator().evaluate(record, latest)
    await update.message.reply_text(format_status(result), parse_mode="HTML", reply_markup=aquarium_menu())
    return AQUARIUM_MENU
