"""Title normalization pipeline.

Responsibilities:
- Turn raw title text into a canonical `Title` for one site profile.
- Run cleanup, namespace/fragment splitting, validation, capitalization and
  namespace-specific rewrites as strictly sequential, pure stages.

Each stage takes and returns an immutable `_WorkingTitle`; the first stage
that raises `InvalidTitleError` aborts the run.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from ..config import NormalizerConfig
from ..errors import InvalidTitleError, TitleErrorKind
from ..models.datatypes import FIRST_LETTER_CASE, SiteProfile
from ..namespace import Namespace, NamespaceId, NamespaceResolver
from ..telemetry.logger import NormalizationLogger
from ..title import Title
from .casing import uppercase_first
from .cleaners import TitleTextCleaner
from .ip import sanitize_ip
from .legal_chars import LegalCharacterClassCompiler

_REPLACEMENT_CHARACTER = "\ufffd"
_MAGIC_TILDES = "~~~"


@dataclass(frozen=True, slots=True)
class _WorkingTitle:
    """Intermediate pipeline state."""

    text: str
    namespace: Namespace
    fragment: str | None = None


_Stage = Callable[[_WorkingTitle, SiteProfile], _WorkingTitle]


def _has_surrogates(text: str) -> bool:
    return any("\ud800" <= character <= "\udfff" for character in text)


def _is_relative_path(text: str) -> bool:
    """Return whether `text` would be resolved as a relative URL path."""

    if "." not in text:
        return False
    return (
        text in {".", ".."}
        or text.startswith("./")
        or text.startswith("../")
        or "/./" in text
        or "/../" in text
        or text.endswith("/.")
        or text.endswith("/..")
    )


def _fold_special_name(name: str) -> str:
    return name.casefold().replace(" ", "_")


class TitleNormalizer:
    """Normalize raw title text against a site profile."""

    def __init__(
        self,
        compiler: LegalCharacterClassCompiler | None = None,
        config: NormalizerConfig | None = None,
        resolver: NamespaceResolver | None = None,
        cleaner: TitleTextCleaner | None = None,
        logger: NormalizationLogger | None = None,
    ) -> None:
        """Initialize collaborators, creating defaults for those not injected."""

        self._compiler = compiler or LegalCharacterClassCompiler()
        self._config = config or NormalizerConfig()
        self._config.validate()
        self._resolver = resolver or NamespaceResolver()
        self._cleaner = cleaner or TitleTextCleaner()
        self._logger = logger
        self._stages: tuple[_Stage, ...] = (
            self._clean,
            self._check_encoding,
            self._strip_leading_colon,
            self._check_not_empty,
            self._split_namespace,
            self._check_talk_namespace,
            self._split_fragment,
            self._check_legal_characters,
            self._check_relative,
            self._check_magic_tilde,
            self._check_length,
            self._capitalize,
            self._check_namespaced_not_empty,
            self._sanitize_user_ip,
            self._resolve_special_alias,
        )

    def normalize(
        self,
        text: str,
        profile: SiteProfile,
        default_namespace: Namespace | int | None = None,
    ) -> Title:
        """Return the canonical title for `text` on the site described by `profile`.

        Args:
            text: Raw title text, optionally with a namespace prefix and `#fragment`.
            profile: Site profile to resolve namespaces and rules against.
            default_namespace: Namespace used when `text` has no recognized
                prefix; the main namespace when omitted.

        Raises:
            TypeError: If an argument has the wrong type.
            InvalidTitleError: If the text violates a title rule.
        """

        if not isinstance(text, str):
            raise TypeError("Invalid type of title parameter. Must be a string.")
        if not isinstance(profile, SiteProfile):
            raise TypeError("Invalid type of profile parameter. Must be a SiteProfile.")

        working = _WorkingTitle(
            text=text,
            namespace=self._coerce_namespace(default_namespace, profile),
        )
        for stage in self._stages:
            try:
                working = stage(working, profile)
            except InvalidTitleError as exc:
                if self._logger is not None:
                    self._logger.log_stage_failure(stage.__name__.lstrip("_"), exc.kind.value)
                raise

        title = Title(key=working.text, namespace=working.namespace, fragment=working.fragment)
        if self._logger is not None:
            self._logger.log_normalized(title.prefixed_key, title.namespace.id)
        return title

    @staticmethod
    def _coerce_namespace(
        namespace: Namespace | int | None, profile: SiteProfile
    ) -> Namespace:
        """Bind a caller-supplied default namespace to `profile`."""

        if namespace is None:
            return Namespace.main(profile)
        if isinstance(namespace, Namespace):
            namespace_id = namespace.id
        elif isinstance(namespace, int) and not isinstance(namespace, bool):
            namespace_id = int(namespace)
        else:
            raise TypeError("Invalid type of default namespace. Must be a Namespace or an int.")
        if namespace_id != NamespaceId.MAIN and profile.namespace_info(namespace_id) is None:
            raise ValueError(
                f"Default namespace id {namespace_id} is not defined by the site profile."
            )
        return Namespace(namespace_id, profile)

    def _split_prefix(self, text: str, profile: SiteProfile) -> tuple[Namespace, str] | None:
        """Split off the longest `prefix:` whose prefix names a namespace."""

        # Prefixes longer than the longest namespace name never resolve;
        # trailing underscores before the colon do not count.
        bound = self._resolver.longest_name_length(profile)
        while bound < len(text) and text[bound] == "_":
            bound += 1
        colons = [index for index, character in enumerate(text[: bound + 1]) if character == ":"]
        for index in reversed(colons):
            prefix = text[:index].rstrip("_")
            if not prefix:
                continue
            namespace = self._resolver.resolve(prefix, profile)
            if namespace is not None:
                return namespace, text[index + 1 :].lstrip("_")
        return None

    def _clean(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        return replace(working, text=self._cleaner.clean(working.text))

    def _check_encoding(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        """Reject text that was decoded from invalid UTF-8."""

        if _REPLACEMENT_CHARACTER in working.text or _has_surrogates(working.text):
            raise InvalidTitleError(kind=TitleErrorKind.INVALID_UTF8, title=working.text)
        return working

    def _strip_leading_colon(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        """A leading colon selects the main namespace over the caller's default."""

        if not working.text.startswith(":"):
            return working
        return replace(
            working,
            text=working.text[1:].lstrip("_"),
            namespace=Namespace.main(profile),
        )

    def _check_not_empty(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        if not working.text:
            raise InvalidTitleError(kind=TitleErrorKind.INVALID_EMPTY, title=working.text)
        return working

    def _split_namespace(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        split = self._split_prefix(working.text, profile)
        if split is None:
            return working
        namespace, remainder = split
        return replace(working, text=remainder, namespace=namespace)

    def _check_talk_namespace(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        """Reject `Talk:File:X` style titles; Talk has no sub-namespaces."""

        if not working.namespace.is_talk():
            return working
        split = self._split_prefix(working.text, profile)
        if split is not None and not split[0].is_main():
            raise InvalidTitleError(
                kind=TitleErrorKind.INVALID_TALK_NAMESPACE, title=working.text
            )
        return working

    def _split_fragment(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        """Move everything after the first `#` into the fragment."""

        text, marker, fragment = working.text.partition("#")
        if not marker:
            return working
        return replace(
            working,
            text=text.rstrip("_"),
            fragment=fragment.lstrip("_") or None,
        )

    def _check_legal_characters(
        self, working: _WorkingTitle, profile: SiteProfile
    ) -> _WorkingTitle:
        pattern = self._compiler.invalid_title_pattern(profile.legal_title_chars)
        match = pattern.search(working.text)
        if match is not None:
            raise InvalidTitleError(
                kind=TitleErrorKind.INVALID_CHARACTERS,
                title=working.text,
                offending=match.group(0),
            )
        return working

    def _check_relative(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        # Browsers resolve `.` and `..` path segments, making such pages unreachable.
        if _is_relative_path(working.text):
            raise InvalidTitleError(kind=TitleErrorKind.INVALID_RELATIVE, title=working.text)
        return working

    def _check_magic_tilde(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        # Three or more tildes expand to signatures when saved.
        if _MAGIC_TILDES in working.text:
            raise InvalidTitleError(kind=TitleErrorKind.INVALID_MAGIC_TILDE, title=working.text)
        return working

    def _check_length(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        max_length = self._config.max_bytes_for(working.namespace.is_special())
        if len(working.text.encode("utf-8")) > max_length:
            raise InvalidTitleError(
                kind=TitleErrorKind.INVALID_TOO_LONG,
                title=working.text,
                max_length=max_length,
            )
        return working

    def _capitalize(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        if profile.case_mode(working.namespace.id) != FIRST_LETTER_CASE:
            return working
        return replace(
            working,
            text=uppercase_first(
                working.text, profile.language, self._config.dotted_i_languages
            ),
        )

    def _check_namespaced_not_empty(
        self, working: _WorkingTitle, profile: SiteProfile
    ) -> _WorkingTitle:
        if not working.namespace.is_main() and not working.text:
            raise InvalidTitleError(kind=TitleErrorKind.INVALID_EMPTY, title=working.text)
        return working

    def _sanitize_user_ip(self, working: _WorkingTitle, profile: SiteProfile) -> _WorkingTitle:
        if not (working.namespace.is_user() or working.namespace.is_user_talk()):
            return working
        return replace(working, text=sanitize_ip(working.text))

    def _resolve_special_alias(
        self, working: _WorkingTitle, profile: SiteProfile
    ) -> _WorkingTitle:
        """Rewrite a special page alias to the page's primary spelling."""

        if not working.namespace.is_special():
            return working
        name, separator, rest = working.text.partition("/")
        folded = _fold_special_name(name)
        for entry in profile.special_page_aliases:
            if any(_fold_special_name(alias) == folded for alias in entry.aliases):
                primary = entry.primary.replace(" ", "_")
                return replace(working, text=primary + separator + rest)
        return working
