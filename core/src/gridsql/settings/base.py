from pydantic_settings import BaseSettings, SettingsConfigDict


class GridBaseSettings(BaseSettings):
    """Base class for every gridsql settings group.

    All groups read flat ``GRIDSQL_*`` environment variables (and an optional
    ``.env`` file) so a nested group does not change the variable names an
    operator sets.
    """
    model_config = SettingsConfigDict(
        env_prefix="GRIDSQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )
