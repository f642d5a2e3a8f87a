# companies_api/crud/companies.py
import logging
import threading
from typing import Iterable, List, Optional

from companies_api.core.errors import CompanyNotFound, InvalidPayload
from companies_api.models.company import SEED_COMPANIES, Company

logger = logging.getLogger(__name__)

PATCHABLE = ("name", "industry", "address")


class CompanyRegistry:
    """
    In-memory, ordered collection of companies plus the id counter.

    One instance is created per app and handed to the routes and the
    reset job. Every operation holds ``_lock`` for its whole
    read-then-write sequence; records handed out are copies.
    """

    def __init__(self, seed: Iterable[Company] = SEED_COMPANIES, *, accept_empty_values: bool = False):
        self._seed = tuple(c.copy() for c in seed)
        self._accept_empty_values = accept_empty_values
        self._lock = threading.Lock()
        self._companies: List[Company] = []
        self._next_id = 1
        self.reset()

    def __len__(self) -> int:
        with self._lock:
            return len(self._companies)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def _find_index(self, company_id: Optional[int]) -> int:
        if company_id is not None:
            for i, c in enumerate(self._companies):
                if c.id == company_id:
                    return i
        raise CompanyNotFound(company_id)

    def _supplied(self, value: Optional[str]) -> bool:
        if value is None:
            return False
        return self._accept_empty_values or value != ""

    def list_summaries(self) -> List[dict]:
        with self._lock:
            return [c.summary() for c in self._companies]

    def create(self, name: Optional[str], industry: Optional[str], address: Optional[str] = None) -> Company:
        if not name or not industry:
            raise InvalidPayload()
        with self._lock:
            company = Company(id=self._next_id, name=name, industry=industry, address=address or "")
            self._next_id += 1
            self._companies.append(company)
            logger.info("[companies] created id=%s name=%r", company.id, company.name)
            return company.copy()

    def get(self, company_id: Optional[int]) -> Company:
        with self._lock:
            return self._companies[self._find_index(company_id)].copy()

    def update(
        self,
        company_id: Optional[int],
        name: Optional[str] = None,
        industry: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Company:
        """
        Overwrite the supplied fields of one record in place.
        Unknown id wins over an empty patch (404 before 400).
        """
        values = dict(zip(PATCHABLE, (name, industry, address)))
        with self._lock:
            company = self._companies[self._find_index(company_id)]
            changes = {k: v for k, v in values.items() if self._supplied(v)}
            if not changes:
                raise InvalidPayload()
            for k, v in changes.items():
                setattr(company, k, v)
            logger.info("[companies] updated id=%s fields=%s", company.id, sorted(changes))
            return company.copy()

    def delete(self, company_id: Optional[int]) -> None:
        with self._lock:
            removed = self._companies.pop(self._find_index(company_id))
            logger.info("[companies] deleted id=%s", removed.id)

    def reset(self) -> None:
        with self._lock:
            self._companies = [c.copy() for c in self._seed]
            self._next_id = max((c.id for c in self._seed), default=0) + 1
        logger.info("[companies] reset to seed data (%d records)", len(self._seed))
