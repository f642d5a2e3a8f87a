from typing import Optional
from pydantic import BaseModel, ConfigDict


# ---------- OUT MODELS ----------
class CompanySummary(BaseModel):
    id: int
    name: str


class CompanyOut(BaseModel):
    id: int
    name: str
    industry: str
    address: str = ""

    model_config = ConfigDict(from_attributes=True)


# ---------- IN MODELS ----------
# Presence checks live in the registry so a missing name and an empty
# name produce the same 400; only the type shape is validated here.
class CompanyCreate(BaseModel):
    name: Optional[str] = None
    industry: Optional[str] = None
    address: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class CompanyUpdate(BaseModel):
    name: Optional[str] = None
    industry: Optional[str] = None
    address: Optional[str] = None

    model_config = ConfigDict(extra="ignore")
