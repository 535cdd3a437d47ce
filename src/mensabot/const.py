"""Command schema and presentation constants."""

from .models import Classifier, CorrectionKind, DayToken

COMMAND_NAME = "mensa"
COMMAND_DESCRIPTION = "Zeige den Speiseplan der Mensa an."

DAY_OPTION = "tag"
DAY_OPTION_DESCRIPTION = "Tag für den der Speiseplan angezeigt werden soll."
CANTEEN_OPTION = "kantine"
CANTEEN_OPTION_DESCRIPTION = "Kantine für die der Speiseplan angezeigt werden soll."

DAY_CHOICES = (
    ("Heute", DayToken.TODAY),
    ("Morgen", DayToken.TOMORROW),
    ("Übermorgen", DayToken.DAY_AFTER_TOMORROW),
    ("Montag", DayToken.MONDAY),
    ("Dienstag", DayToken.TUESDAY),
    ("Mittwoch", DayToken.WEDNESDAY),
    ("Donnerstag", DayToken.THURSDAY),
    ("Freitag", DayToken.FRIDAY),
)

CANTEEN_LIST = (
    ("KIT Campus", "mensa_adenauerring"),
    ("Gottesaue", "mensa_gottesaue"),
    ("Moltke", "mensa_moltke"),
    ("Moltke 30", "mensa_x1moltkestrasse"),
    ("Erzberger", "mensa_erzberger"),
    ("Tiefbronner", "mensa_tiefenbronner"),
    ("Holzgarten", "mensa_holzgarten"),
)

WEEKDAY_NAMES = ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag")
UNKNOWN_WEEKDAY = "Unbekannt"

CLASSIFIER_EMOJI = {
    Classifier.PORK: "🐖",
    Classifier.ORGANIC_PORK: "🐖",
    Classifier.BEEF: "🐄",
    Classifier.ORGANIC_BEEF: "🐄",
    Classifier.GELATINE: "🐈",
    Classifier.FISH: "🐟",
    Classifier.VEGETARIAN: "🥕",
    Classifier.MENSA_VITAL: "🥦",
    Classifier.VEGAN: "🌱",
}

CORRECTION_NOTICES = {
    CorrectionKind.ROLLED_OVER: (
        "Die Mensa ist geschlossen. Ich habe dir den nächsten Tag ausgewählt."
    ),
    CorrectionKind.DAYS_SKIPPED: (
        "An dem ausgewählten Tag ist die Mensa geschlossen. "
        "Ich habe dir den nächsten Tag ausgewählt."
    ),
}

TITLE_TEMPLATE = "Mensaeinheitsbrei für {canteen} am {weekday}"
EMBED_COLOR = 0x6F00FF
EMBED_FOOTER = "Klick auf mein Profilbild und lad mich zu deinem Server ein!"
NO_MENU_MESSAGE = "No menu available."
FAILURE_MESSAGE = "Da ist etwas schiefgelaufen. Bitte versuche es später erneut."
