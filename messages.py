# messages.py
# User-facing text. The engine returns structured results; everything a
# user reads is produced here.
from typing import Optional

from parameters import DISPLAY_NAMES, key_of

DEFAULT_LANGUAGE = "en"

MESSAGES = {
    "es": {
        "status.noParams": "Registra un parámetro para ver el estado",
        "status.undefinedRanges": "Rangos no definidos para este tipo de acuario",
        "status.stable": "Parámetros estables",
        "status.alert": "Alerta: {alerts}",
        "direction.low": "bajo",
        "direction.high": "alto",
        "alert.item": "{name} {direction}",
        "advice.title": "Recomendaciones:",
        "mainType.marine": "Marino",
        "mainType.freshwater": "Agua dulce",
        "subType.fishOnly": "Solo peces",
        "subType.softCorals": "Corales blandos",
        "subType.lps": "Corales LPS",
        "subType.sps": "Corales SPS",
        "subType.mixedReef": "Mixto (LPS, SPS y blandos)",
        "subType.community": "Comunitario",
        "subType.goldfish": "Peces dorados / orientales",
        "subType.americanCichlids": "Cíclidos americanos",
        "subType.africanCichlids": "Cíclidos africanos",
        "subType.plantedLow": "Plantado (bajos requerimientos)",
        "subType.plantedMid": "Plantado (medios requerimientos)",
        "subType.plantedHigh": "Plantado (altos requerimientos)",
        "param.kh": "Alcalinidad (KH)",
        "param.ca": "Calcio (Ca)",
        "param.mg": "Magnesio (Mg)",
        "param.no3": "Nitrato (NO₃)",
        "param.po4": "Fosfato (PO₄)",
        "param.salinity": "Salinidad",
        "param.temp": "Temperatura",
        "param.ph": "pH",
        "param.gh": "Dureza general (GH)",
        "param.ammonia": "Amonio",
        "param.nitrite": "Nitrito",
        "param.nitrate": "Nitrato",
        "param.iron": "Hierro (Fe)",
        "param.co2": "CO₂",
        "param.tds": "TDS",
        # bot
        "bot.welcome": "¡Hola! Este es un bot para llevar el diario de tu acuario.",
        "bot.mainMenu": "Menú principal.",
        "bot.myAquariums": "Mis acuarios",
        "bot.addAquarium": "Añadir acuario",
        "bot.back": "Volver",
        "bot.cancel": "Cancelar",
        "bot.noAquariums": "No tienes acuarios.",
        "bot.aquariumList": "Mis acuarios:",
        "bot.chooseAquarium": "Elige un acuario con los botones.",
        "bot.aquariumNotFound": "Acuario no encontrado.",
        "bot.aquariumHeader": "Acuario: {name} ({sub_type}, {volume} l)",
        "bot.askName": "Introduce el nombre del acuario:",
        "bot.askMainType": "Elige el tipo principal:",
        "bot.askSubType": "Elige el sub-tipo:",
        "bot.askVolume": "Indica el volumen en litros:",
        "bot.invalidVolume": "Introduce un número > 0 o «Cancelar».",
        "bot.aquariumAdded": "Acuario «{name}» añadido.",
        "bot.addReading": "➕ Medición",
        "bot.status": "Estado",
        "bot.settings": "Ajustes",
        "bot.chooseAction": "Elige una acción.",
        "bot.chooseParam": "Elige un parámetro:",
        "bot.chooseParamButton": "Elige el parámetro con los botones.",
        "bot.askValue": "Introduce {name} ({min}–{max} {unit}) o «Cancelar».",
        "bot.invalidNumber": "Introduce un número válido.",
        "bot.readingSaved": "{name}: {value} {mark} (rango: {min}–{max} {unit})",
        "bot.settingsMenu": "Ajustes del acuario:",
        "bot.rename": "Cambiar nombre",
        "bot.changeVolume": "Cambiar volumen",
        "bot.delete": "Eliminar acuario",
        "bot.askNewName": "Introduce el nuevo nombre:",
        "bot.nameChanged": "Nombre cambiado.",
        "bot.askNewVolume": "Introduce el nuevo volumen en litros:",
        "bot.volumeChanged": "Volumen cambiado.",
        "bot.confirmDelete": "¿Seguro que quieres eliminar «{name}»? Escribe «Sí» para confirmar.",
        "bot.yes": "Sí",
        "bot.deleted": "Acuario eliminado.",
        "bot.deleteCancelled": "Eliminación cancelada.",
        "bot.noAquariumSelected": "Error: no hay acuario seleccionado.",
        "bot.readings": "Mediciones",
        "bot.readingsTitle": "Últimas mediciones:",
        "bot.noReadings": "Todavía no hay mediciones.",
        "bot.chooseReading": "Elige una medición para eliminarla o «Volver».",
        "bot.confirmReadingDelete": "¿Eliminar {reading}? Escribe «Sí» para confirmar.",
        "bot.readingDeleted": "Medición eliminada.",
        "bot.readingNotFound": "Medición no encontrada.",
    },
    "en": {
        "status.noParams": "Log a parameter to see the status",
        "status.undefinedRanges": "Ranges not defined for this aquarium type",
        "status.stable": "Stable parameters",
        "status.alert": "Alert: {alerts}",
        "direction.low": "low",
        "direction.high": "high",
        "alert.item": "{name} {direction}",
        "advice.title": "Recommendations:",
        "mainType.marine": "Marine",
        "mainType.freshwater": "Freshwater",
        "subType.fishOnly": "Fish only",
        "subType.softCorals": "Soft corals",
        "subType.lps": "LPS corals",
        "subType.sps": "SPS corals",
        "subType.mixedReef": "Mixed reef (LPS, SPS and soft)",
        "subType.community": "Community",
        "subType.goldfish": "Goldfish / fancy goldfish",
        "subType.americanCichlids": "American cichlids",
        "subType.africanCichlids": "African cichlids",
        "subType.plantedLow": "Planted (low tech)",
        "subType.plantedMid": "Planted (mid tech)",
        "subType.plantedHigh": "Planted (high tech)",
        "param.kh": "Alkalinity (KH)",
        "param.ca": "Calcium (Ca)",
        "param.mg": "Magnesium (Mg)",
        "param.no3": "Nitrate (NO₃)",
        "param.po4": "Phosphate (PO₄)",
        "param.salinity": "Salinity",
        "param.temp": "Temperature",
        "param.ph": "pH",
        "param.gh": "General hardness (GH)",
        "param.ammonia": "Ammonia",
        "param.nitrite": "Nitrite",
        "param.nitrate": "Nitrate",
        "param.iron": "Iron (Fe)",
        "param.co2": "CO₂",
        "param.tds": "TDS",
        # bot
        "bot.welcome": "Hi! This bot keeps a journal of your aquarium.",
        "bot.mainMenu": "Main menu.",
        "bot.myAquariums": "My aquariums",
        "bot.addAquarium": "Add aquarium",
        "bot.back": "Back",
        "bot.cancel": "Cancel",
        "bot.noAquariums": "You have no aquariums.",
        "bot.aquariumList": "My aquariums:",
        "bot.chooseAquarium": "Please pick an aquarium with the buttons.",
        "bot.aquariumNotFound": "Aquarium not found.",
        "bot.aquariumHeader": "Aquarium: {name} ({sub_type}, {volume} l)",
        "bot.askName": "Enter the aquarium name:",
        "bot.askMainType": "Choose the main type:",
        "bot.askSubType": "Choose the sub-type:",
        "bot.askVolume": "Volume in liters:",
        "bot.invalidVolume": "Enter a number > 0 or \"Cancel\".",
        "bot.aquariumAdded": "Aquarium \"{name}\" added.",
        "bot.addReading": "➕ Reading",
        "bot.status": "Status",
        "bot.settings": "Settings",
        "bot.chooseAction": "Choose an action.",
        "bot.chooseParam": "Choose a parameter:",
        "bot.chooseParamButton": "Pick the parameter with the buttons.",
        "bot.askValue": "Enter {name} ({min}–{max} {unit}) or \"Cancel\".",
        "bot.invalidNumber": "Enter a valid number.",
        "bot.readingSaved": "{name}: {value} {mark} (range: {min}–{max} {unit})",
        "bot.settingsMenu": "Aquarium settings:",
        "bot.rename": "Rename",
        "bot.changeVolume": "Change volume",
        "bot.delete": "Delete aquarium",
        "bot.askNewName": "Enter the new name:",
        "bot.nameChanged": "Name changed.",
        "bot.askNewVolume": "Enter the new volume in liters:",
        "bot.volumeChanged": "Volume changed.",
        "bot.confirmDelete": "Delete \"{name}\"? Type \"Yes\" to confirm.",
        "bot.yes": "Yes",
        "bot.deleted": "Aquarium deleted.",
        "bot.deleteCancelled": "Deletion cancelled.",
        "bot.noAquariumSelected": "Error: no aquarium selected.",
        "bot.readings": "Readings",
        "bot.readingsTitle": "Latest readings:",
        "bot.noReadings": "No readings yet.",
        "bot.chooseReading": "Pick a reading to delete it, or \"Back\".",
        "bot.confirmReadingDelete": "Delete {reading}? Type \"Yes\" to confirm.",
        "bot.readingDeleted": "Reading deleted.",
        "bot.readingNotFound": "Reading not found.",
    },
}


def language_of(language: Optional[str]) -> str:
    language = (language or DEFAULT_LANGUAGE).lower()
    return language if language in MESSAGES else DEFAULT_LANGUAGE


def t(key: str, language: Optional[str] = None, **params) -> str:
    """Translate a message id, falling back to English and then to the id."""
    table = MESSAGES[language_of(language)]
    text = table.get(key) or MESSAGES[DEFAULT_LANGUAGE].get(key) or key
    return text.format(**params) if params else text


def param_name(key, language: Optional[str] = None, default: Optional[str] = None) -> str:
    key = key_of(key)
    name = t(f"param.{key}", language)
    if name == f"param.{key}":
        return default or DISPLAY_NAMES.get(key, key)
    return name


def render_alert(alert, language: Optional[str] = None) -> str:
    return t(
        "alert.item", language,
        name=param_name(alert.parameter_key, language, alert.display_name),
        direction=t(f"direction.{key_of(alert.direction)}", language),
    )


def render_status(result, language: Optional[str] = None) -> str:
    if result.alerts:
        alerts = ", ".join(render_alert(a, language) for a in result.alerts)
        return t(result.summary_key, language, alerts=alerts)
    return t(result.summary_key, language)
