import re
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    field_validator,
    model_validator,
)

from support_diagnostics import constants
from support_diagnostics.auth import AuthType


class DiagnosticConfig(BaseModel):
    """Validated command line configuration.

    Settings are immutable once parsed. Optional values stay ``None`` when the
    user did not supply them; their defaults are applied by CollectionSettings.
    """

    model_config = ConfigDict(frozen=True)

    help_requested: bool = False

    # Always present
    host_port: str = constants.DEFAULT_HOST_PORT
    node_name: str = constants.DEFAULT_NODE_NAME

    # Nullable
    output_directory: str | None = None
    stat_runs: PositiveInt | None = None
    stat_interval: PositiveInt | None = None
    auth_type: str | None = None
    auth_creds: str | None = None
    auth_password: str | None = None

    @field_validator("host_port")
    @classmethod
    def check_host_port(cls, value: str) -> str:
        if re.fullmatch(constants.HOST_PORT_PATTERN, value, re.ASCII) is None:
            raise ValueError(f"must match pattern '{constants.HOST_PORT_PATTERN}'")
        return value

    @field_validator("node_name")
    @classmethod
    def check_node_name(cls, value: str) -> str:
        if re.fullmatch(constants.NODE_NAME_PATTERN, value, re.ASCII) is None:
            raise ValueError(f"must match pattern '{constants.NODE_NAME_PATTERN}'")
        return value


class CollectionSettings(BaseModel):
    """Settings handed to the collection pipeline, with every default applied."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=constants.MAX_PORT)
    node_name: str = Field(min_length=1)
    output_directory: Path
    stat_runs: PositiveInt
    stat_interval: PositiveInt
    auth_type: AuthType | None = None
    auth_creds: str | None = None
    auth_password: str | None = None

    @model_validator(mode="after")
    def check_auth(self) -> "CollectionSettings":
        if (self.auth_type is None) != (self.auth_creds is None):
            raise ValueError("auth_type and auth_creds must be supplied together")
        if self.auth_password is not None and self.auth_type != "basic":
            raise ValueError("auth_password can only be used with basic authentication")
        return self

    @property
    def host_port(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_config(
        cls, config: DiagnosticConfig, now: datetime | None = None
    ) -> "CollectionSettings":
        """Resolve collection settings from the parsed command line.

        Args:
            config: Validated command line configuration
            now: Time used for the synthesized output directory name,
                defaults to the current local time

        Returns:
            CollectionSettings: Settings with defaults applied

        Raises:
            pydantic.ValidationError: If the combination of values is unusable
        """
        host, _, port = config.host_port.rpartition(":")

        output_directory = config.output_directory
        if output_directory is None:
            timestamp = (now or datetime.now()).strftime(
                constants.OUTPUT_TIMESTAMP_FORMAT
            )
            output_directory = constants.OUTPUT_DIRECTORY_TEMPLATE.format(
                host=host, node=config.node_name, timestamp=timestamp
            )

        stat_runs = config.stat_runs
        if stat_runs is None:
            stat_runs = constants.DEFAULT_STAT_RUNS
        stat_interval = config.stat_interval
        if stat_interval is None:
            stat_interval = constants.DEFAULT_STAT_INTERVAL

        return cls(
            host=host,
            port=int(port),
            node_name=config.node_name,
            output_directory=Path(output_directory),
            stat_runs=stat_runs,
            stat_interval=stat_interval,
            auth_type=config.auth_type,
            auth_creds=config.auth_creds,
            auth_password=config.auth_password,
        )

    def model_dump_public(self) -> dict[str, Any]:
        """Dump the settings for display, with the password masked."""
        settings = self.model_dump(mode="json")
        if settings["auth_password"] is not None:
            settings["auth_password"] = constants.MASKED_VALUE
        return settings
