class OduError(Exception):
    pass


class SettingsError(OduError):
    pass


class CharacterTableError(OduError):
    pass
