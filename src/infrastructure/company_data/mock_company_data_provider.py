"""
Infrastructure adapter: static mock data → ICompanyDataProvider.

Stands in for a real company data integration. Every call returns the same
synthetic figures whatever the company name; no lookup happens.
"""

import logging

from src.domain.entities.company_data import (
    AdditionalFinancialInfo,
    CompanyIdentity,
    FinancialData,
)
from src.domain.ports.company_data_port import ICompanyDataProvider

logger = logging.getLogger(__name__)


class MockCompanyDataProvider(ICompanyDataProvider):
    COUNTRY = "Morocco"
    INDUSTRY_DOMAIN = "Telecom"
    FOUNDED_YEAR = 1911

    TURNOVER = (1_000_000.0, 2_000_000.0, 3_000_000.0)
    PROFIT = (10_000.0, 20_000.0, 30_000.0)
    STOCK = (450.0, 460.0, 480.0, 480.0, 320.0, 340.0, 250.0)

    ADDITIONAL_INFO = "The number of subscribers is the very upward trend in the last years"

    def get_company_identity(self, company_name: str) -> CompanyIdentity:
        logger.info("Company identity requested — company=%s", company_name)
        return CompanyIdentity(
            company_name=company_name,
            country=self.COUNTRY,
            industry_domain=self.INDUSTRY_DOMAIN,
            founded_year=self.FOUNDED_YEAR,
        )

    def get_financial_data(self, company_name: str) -> FinancialData:
        logger.info("Financial data requested — company=%s", company_name)
        return FinancialData(
            turnover=self.TURNOVER,
            profit=self.PROFIT,
            stock=self.STOCK,
        )

    def get_additional_financial_info(self, company_name: str) -> AdditionalFinancialInfo:
        logger.info("Additional financial info requested — company=%s", company_name)
        return AdditionalFinancialInfo(additional_financial_infos=self.ADDITIONAL_INFO)
