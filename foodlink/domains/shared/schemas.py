# foodlink/domains/shared/schemas.py

from sqlmodel import SQLModel


class MasterPasswordVerifyResult(SQLModel):
    verified: bool = True


class UploadRead(SQLModel):
    url: str
