# handlers/__init__.py
# Conversation states

(
    MENU, CHOOSE_AQUARIUM,
    ADD_AQUARIUM_NAME, ADD_AQUARIUM_TYPE, ADD_AQUARIUM_SUBTYPE, ADD_AQUARIUM_VOLUME,
    AQUARIUM_MENU, PARAM_CHOOSE, PARAM_VALUE,
    SETTINGS, EDIT_NAME, EDIT_VOLUME, CONFIRM_DELETE,
    READINGS_LIST, CONFIRM_READING_DELETE,
) = range(15)
