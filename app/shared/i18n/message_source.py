"""
YAML-backed message bundles.

``messages.yaml`` is the base bundle. ``messages_<locale>.yaml`` files
hold translations, e.g. ``messages_de.yaml``. Templates use positional
placeholders ``{0}``, ``{1}``, ... filled from the call arguments.

Lookup order for a locale such as ``de-at``:
``de-at`` -> ``de`` -> default locale -> base bundle.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

import yaml

from app.domain.users.ports import MessageResolver
from app.shared.i18n.locale import normalize_locale, primary_language

logger = logging.getLogger(__name__)

BASE_BUNDLE = "messages"
_PLACEHOLDER = re.compile(r"\{(\d+)\}")


class MessageNotFoundError(LookupError):
    """Raised when no bundle defines the requested message key."""

    def __init__(self, key: str, locale: str) -> None:
        super().__init__(f"No message found under key '{key}' for locale '{locale}'")
        self.key = key
        self.locale = locale


class MessageSource(MessageResolver):
    """Resolves message keys against bundles loaded once from disk.

    Bundles are read at construction and never reloaded, so one
    instance can be shared by every request.

    Args:
        messages_dir: Directory holding the ``messages*.yaml`` files.
        default_locale: Locale used when none is requested, and for logs.
        base_locale: Language the base bundle is written in. Requests
            for it are answered from the base bundle even when another
            default locale is configured.
    """

    def __init__(
        self,
        messages_dir: Union[str, Path],
        default_locale: str = "en",
        base_locale: str = "en",
    ) -> None:
        self._messages_dir = Path(messages_dir)
        self._default_locale = normalize_locale(default_locale)
        self._base_locale = normalize_locale(base_locale)
        self._base: dict[str, str] = {}
        self._bundles: dict[str, dict[str, str]] = {}
        self._load_bundles()

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def supported_locales(self) -> frozenset[str]:
        """Locales with a bundle on disk, plus the default and base locales."""
        return frozenset(self._bundles) | {self._default_locale, self._base_locale}

    def get_message(
        self, key: str, *args: str, locale: Optional[str] = None
    ) -> str:
        """Resolve and format a message for ``locale``.

        Raises:
            MessageNotFoundError: If no bundle in the chain has the key.
        """
        template = self._lookup(key, locale or self._default_locale)
        return self._format(template, args)

    def get_log_message(self, key: str, *args: str) -> str:
        """Resolve and format a message in the default locale."""
        return self.get_message(key, *args, locale=self._default_locale)

    def _load_bundles(self) -> None:
        if not self._messages_dir.is_dir():
            raise FileNotFoundError(
                f"Message bundle directory not found: {self._messages_dir}"
            )

        for path in sorted(self._messages_dir.glob(f"{BASE_BUNDLE}*.yaml")):
            if path.stem == BASE_BUNDLE:
                self._base = self._read_bundle(path)
            elif path.stem.startswith(f"{BASE_BUNDLE}_"):
                locale = normalize_locale(path.stem[len(BASE_BUNDLE) + 1:])
                self._bundles[locale] = self._read_bundle(path)

        logger.info(
            "Loaded message bundles from %s (base=%s, locales=%s)",
            self._messages_dir,
            bool(self._base),
            ", ".join(sorted(self._bundles)) or "-",
        )

    @staticmethod
    def _read_bundle(path: Path) -> dict[str, str]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Message bundle {path} must be a mapping of keys to templates")
        return {str(key): str(value) for key, value in data.items()}

    def _candidate_locales(self, locale: str) -> list[str]:
        chain = [
            normalize_locale(locale),
            primary_language(locale),
            self._default_locale,
            primary_language(self._default_locale),
        ]
        return list(dict.fromkeys(chain))

    def _lookup(self, key: str, locale: str) -> str:
        for candidate in self._candidate_locales(locale):
            bundle = self._bundles.get(candidate)
            if bundle is None and candidate == self._base_locale:
                bundle = self._base
            if bundle is not None and key in bundle:
                return bundle[key]
        if key in self._base:
            return self._base[key]
        raise MessageNotFoundError(key, locale)

    @staticmethod
    def _format(template: str, args: tuple[str, ...]) -> str:
        # Placeholders without a matching argument are left as-is.
        def substitute(match: re.Match) -> str:
            index = int(match.group(1))
            return str(args[index]) if index < len(args) else match.group(0)

        return _PLACEHOLDER.sub(substitute, template)
