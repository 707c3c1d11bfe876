from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MissingCredentialError(ValueError):
    """Raised when monitoring is started without a Discord application id."""


class AppConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    discord_app_id: str = Field(default="", alias="DiscordAppId")
    process_name: str = Field(default="Resolve", alias="ProcessName")
    title_marker: str = Field(default="DaVinci Resolve", alias="TitleMarker")
    poll_interval_seconds: int = Field(default=15, ge=1, alias="PollIntervalSeconds")

    def has_credential(self) -> bool:
        return bool(self.discord_app_id.strip())

    def to_monitor_config(self) -> dict:
        return {
            "app_id": self.discord_app_id.strip(),
            "process_name": self.process_name,
            "title_marker": self.title_marker,
            "poll_interval_seconds": self.poll_interval_seconds,
        }
