"""
Message translation

Thin wrapper over gettext catalogs. Falls back to the source message when
no catalog exists for the configured locale.

Usage:
    Translator.get_instance().trans("Unknown module %(code)s", code="colissimo")
"""
import gettext
import logging
from typing import Dict, Optional

from delivery_postage.core.config import settings

logger = logging.getLogger(__name__)


class Translator:
    """Locale-bound message translator with a shared default instance."""

    _instance: Optional["Translator"] = None

    def __init__(
        self,
        locale: Optional[str] = None,
        localedir: Optional[str] = None,
        domain: Optional[str] = None,
    ):
        self.locale = locale or settings.DEFAULT_LOCALE
        self.localedir = localedir if localedir is not None else settings.TRANSLATIONS_DIR
        self.domain = domain or settings.TRANSLATION_DOMAIN
        self._catalogs: Dict[str, gettext.NullTranslations] = {}

    @classmethod
    def get_instance(cls) -> "Translator":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next call re-reads settings."""
        cls._instance = None

    def _catalog(self, locale: str) -> gettext.NullTranslations:
        if locale not in self._catalogs:
            catalog = gettext.translation(
                self.domain,
                localedir=self.localedir,
                languages=[locale],
                fallback=True,
            )
            if type(catalog) is gettext.NullTranslations:
                logger.debug(f"No '{self.domain}' catalog for locale {locale}, using source messages")
            self._catalogs[locale] = catalog
        return self._catalogs[locale]

    def trans(self, message: str, locale: Optional[str] = None, **params) -> str:
        """Translate message and substitute %(name)s placeholders from params."""
        translated = self._catalog(locale or self.locale).gettext(message)
        if params:
            translated = translated % params
        return translated
