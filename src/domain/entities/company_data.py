"""
Domain entities returned by the company data tools.
Zero external dependencies — pure Python dataclasses only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompanyIdentity:
    company_name: str
    country: str
    industry_domain: str
    founded_year: int


@dataclass(frozen=True)
class FinancialData:
    """Turnover and profit cover the last 3 years, stock the last 7 days."""

    turnover: tuple[float, ...]
    profit: tuple[float, ...]
    stock: tuple[float, ...]


@dataclass(frozen=True)
class AdditionalFinancialInfo:
    additional_financial_infos: str
