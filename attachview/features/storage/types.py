from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from attachview.features.classification.types import FileDescriptor


class AttachmentDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    declared_type: str = ""
    size_bytes: int = Field(ge=0)
    storage_bucket: str
    storage_token: str

    def as_file(self) -> FileDescriptor:
        return FileDescriptor(name=self.name, declared_type=self.declared_type)
