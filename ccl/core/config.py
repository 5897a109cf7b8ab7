from enum import StrEnum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

DEFAULT_NAME = 'default'

LogLevel = Literal['DEBUG', 'INFO', 'NOTICE', 'WARNING', 'ERROR']


class ScanPolicy(StrEnum):
    FORWARD = 'forward'
    STRICT = 'strict'
    CONFIG_FIRST = 'config-first'


class EnvConfig(BaseModel):
    model_config = ConfigDict(frozen=True, title='Configuration')

    env: dict[str, str] = Field(
        default_factory=dict,
        title='Environment Variables',
        description='Environment variables exported to the launched program.',
        examples=[{'ANTHROPIC_AUTH_TOKEN': 'sk-ant-api03-...', 'ANTHROPIC_BASE_URL': 'https://api.anthropic.com'}],
    )

    @field_validator('env', mode='before')
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator('env')
    @classmethod
    def _exportable(cls, value: dict[str, str]) -> dict[str, str]:
        for key, item in value.items():
            if not key or '=' in key or '\0' in key:
                msg = f'invalid environment variable name {key!r}'
                raise ValueError(msg)
            if '\0' in item:
                msg = f'environment variable {key} contains a null byte'
                raise ValueError(msg)
        return value


class ConfigSet(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, title='CCL Configuration Schema')

    schema_ref: str | None = Field(
        default=None,
        alias='$schema',
        title='JSON Schema Reference',
        description='Optional reference to the JSON schema for validation.',
    )
    bin: str | None = Field(
        default=None,
        title='Claude Binary Path',
        description='Path to the claude executable. If not provided, claude is looked up in PATH.',
        examples=['/home/user/.claude/local/claude', '/usr/local/bin/claude'],
    )
    default: EnvConfig = Field(
        default_factory=EnvConfig,
        title='Default Configuration',
        description='Applied on every launch, before the selected configuration.',
    )
    configs: dict[str, EnvConfig] = Field(
        default_factory=dict,
        title='Named Configurations',
        description='Named configuration profiles that can be selected at runtime.',
    )

    @field_validator('default', 'configs', mode='before')
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def known_names(self) -> list[str]:
        return [DEFAULT_NAME, *sorted(n for n in self.configs if n != DEFAULT_NAME)]


class Settings(BaseSettings):
    config_path: Path | None = None
    program: str = 'claude'
    scan_policy: ScanPolicy = ScanPolicy.FORWARD
    set_title: bool = True
    log_level: LogLevel = 'NOTICE'
    log_file: Path | None = None
    model_config = SettingsConfigDict(
        env_prefix='CCL_',
        case_sensitive=False,
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        **_: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
        )


settings = Settings()
