"""Exceptions raised by locale_tokens."""


class LocaleTokensError(RuntimeError):
    pass


class ConfigError(LocaleTokensError):
    """An option has a value of the wrong shape."""


class DictionaryParseError(LocaleTokensError):
    """A dictionary file could not be parsed into a flat mapping."""


class DictionaryLoadError(LocaleTokensError):
    """The locales directory or one of its dictionaries could not be loaded."""


class NoDictionariesError(DictionaryLoadError):
    def __init__(self, directory: str) -> None:
        super().__init__("No translation dictionaries have been found!")
        self.directory = directory


class NoActiveLanguagesError(LocaleTokensError):
    def __init__(self) -> None:
        super().__init__("No translation dictionaries available to create any files!")
