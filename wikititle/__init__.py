"""Top-level package for wikititle.

This package converts raw wiki page-title text into canonical, storage-safe
titles for a given site profile. The main entry point is `TitleNormalizer`.
"""

from loguru import logger

from .config import ConfigLoader, NormalizerConfig
from .errors import InvalidTitleError, TitleErrorKind
from .models import NamespaceAlias, NamespaceInfo, SiteProfile, SpecialPageAlias
from .namespace import Namespace, NamespaceId, NamespaceResolver
from .siteinfo import SiteProfileLoader
from .text.normalizer import TitleNormalizer
from .title import Title

logger.disable(__name__)

__all__ = [
    "ConfigLoader",
    "InvalidTitleError",
    "Namespace",
    "NamespaceAlias",
    "NamespaceId",
    "NamespaceInfo",
    "NamespaceResolver",
    "NormalizerConfig",
    "SiteProfile",
    "SiteProfileLoader",
    "SpecialPageAlias",
    "Title",
    "TitleErrorKind",
    "TitleNormalizer",
    "__version__",
]

__version__ = "0.1.0"
