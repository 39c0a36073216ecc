from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileData(BaseModel):
    """Aggregated profile fields. Every field is a string; absence is ""."""

    friends: str = ""
    friends_list_visible: str = Field(default="", alias="friendsListVisible")
    linkedin: str = ""
    email: str = ""
    phone: str = ""
    bio: str = ""
    position: str = ""
    company: str = ""
    location: str = ""
    marital_status: str = Field(default="", alias="maritalStatus")
    followers: str = ""
    company_followers: str = Field(default="", alias="companyFollowers")
    company_phone: str = Field(default="", alias="companyPhone")
    company_email: str = Field(default="", alias="companyEmail")
    company_website: str = Field(default="", alias="companyWebsite")
    company_fb_page: str = Field(default="", alias="companyFbPage")

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True, extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def _absent_is_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    def to_record(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)
