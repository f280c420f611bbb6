# utils/keyboards.py

from telegram import ReplyKeyboardMarkup, KeyboardButton
from config import LANGUAGE
from messages import t, param_name
from parameters import SUB_TYPES
from utils.helpers import fmt

def main_menu():
    return ReplyKeyboardMarkup(
        [[KeyboardButton(t("bot.myAquariums", LANGUAGE))],
         [KeyboardButton(t("bot.addAquarium", LANGUAGE))]],
        resize_keyboard=True
    )

def aquarium_menu():
    return ReplyKeyboardMarkup(
        [
            [KeyboardButton(t("bot.addReading", LANGUAGE)), KeyboardButton(t("bot.status", LANGUAGE))],
            [KeyboardButton(t("bot.readings", LANGUAGE)), KeyboardButton(t("bot.settings", LANGUAGE))],
            [KeyboardButton(t("bot.back", LANGUAGE))]
        ],
        resize_keyboard=True
    )

def setting_keyboard():
    return ReplyKeyboardMarkup(
        [
            [KeyboardButton(t("bot.rename", LANGUAGE)), KeyboardButton(t("bot.changeVolume", LANGUAGE))],
            [KeyboardButton(t("bot.delete", LANGUAGE))],
            [KeyboardButton(t("bot.back", LANGUAGE))]
        ],
        resize_keyboard=True
    )

def main_type_keyboard():
    return ReplyKeyboardMarkup(
        [[KeyboardButton(t(f"mainType.{m}", LANGUAGE))] for m in SUB_TYPES]
        + [[KeyboardButton(t("bot.cancel", LANGUAGE))]],
        resize_keyboard=True
    )

def sub_type_keyboard(main_type: str):
    kb = [[KeyboardButton(t(f"subType.{s}", LANGUAGE))] for s in SUB_TYPES.get(main_type, ())]
    kb.append([KeyboardButton(t("bot.cancel", LANGUAGE))])
    return ReplyKeyboardMarkup(kb, resize_keyboard=True)

def param_label(entry):
    label = f"{param_name(entry.key, LANGUAGE, entry.display_name)} ({fmt(entry.min)}-{fmt(entry.max)}"
    return f"{label} {entry.unit})" if entry.unit else f"{label})"

def param_keyboard(table):
    kb = [[KeyboardButton(param_label(entry))] for entry in table.values()]
    kb.append([KeyboardButton(t("bot.cancel", LANGUAGE))])
    return ReplyKeyboardMarkup(kb, resize_keyboard=True)

def cancel_keyboard():
    return ReplyKeyboardMarkup([[KeyboardButton(t("bot.cancel", LANGUAGE))]], resize_keyboard=True)

def confirm_keyboard():
    return ReplyKeyboardMarkup(
        [[KeyboardButton(t("bot.yes", LANGUAGE)), KeyboardButton(t("bot.cancel", LANGUAGE))]],
        resize_keyboard=True
    )

def reading_label(m):
    """Button text for a stored Measurement; the id keeps equal readings apart."""
    when = m.created_at.strftime("%d.%m %H:%M") if m.created_at else "-"
    return f"#{m.id} {param_name(m.param, LANGUAGE)} {fmt(m.value)} · {when}"

def readings_keyboard(measurements):
    kb = [[KeyboardButton(reading_label(m))] for m in measurements]
    kb.append([KeyboardButton(t("bot.back", LANGUAGE))])
    return ReplyKeyboardMarkup(kb, resize_keyboard=True)
