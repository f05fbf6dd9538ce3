from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .match import MatchMode, StringComparison


class MatcherSettings(BaseSettings):
    """
    Defaults for matchers built without explicit options.

    Read from ``AC_TEXTMATCH_*`` environment variables, e.g.
    ``AC_TEXTMATCH_DEFAULT_COMPARISON=ordinal_ignore_case``.
    """

    default_comparison: StringComparison = StringComparison.CURRENT_CULTURE
    default_match_mode: MatchMode = MatchMode.FUZZY

    model_config = SettingsConfigDict(
        env_prefix="AC_TEXTMATCH_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> MatcherSettings:
    return MatcherSettings()
