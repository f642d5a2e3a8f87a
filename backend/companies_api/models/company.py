# backend/companies_api/models/company.py
from dataclasses import asdict, dataclass, replace


@dataclass
class Company:
    id: int
    name: str
    industry: str
    address: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    def summary(self) -> dict:
        return {"id": self.id, "name": self.name}

    def copy(self) -> "Company":
        return replace(self)


# Restored at startup and on every scheduled reset
SEED_COMPANIES: tuple[Company, ...] = (
    Company(id=1, name="Acme Corp", industry="Technology", address="123 Tech Lane"),
    Company(id=2, name="Beta Ltd", industry="Finance", address="456 Finance Road"),
)
