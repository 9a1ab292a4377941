from uuid import UUID

from pydantic import BaseModel

NIL_UUID = UUID(int=0)


class CreateConfigResponse(BaseModel):
    success: bool
    message: str
    id: UUID = NIL_UUID
