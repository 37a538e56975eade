"""Request payloads of the portal operations."""

from pydantic import BaseModel, ConfigDict, Field


class NewProjectCommand(BaseModel):
    project: str = Field("", description="Name of the project to create")
    billing: str = Field("", description="Billing code (Kontierungsnummer)")
    mega_id: str = Field("", alias="megaId", description="Optional external reference id")

    model_config = ConfigDict(populate_by_name=True)


class NewTestProjectCommand(BaseModel):
    project: str = Field("", description="Name suffix of the test project")


class EditBillingCommand(BaseModel):
    project: str = Field("", description="Project to update")
    billing: str = Field("", description="New billing code")


class EditQuotaCommand(BaseModel):
    project: str = Field("", description="Project to update")
    cpu: int = Field(..., ge=0, description="CPU cores")
    memory: int = Field(..., ge=0, description="Memory in GiB")
