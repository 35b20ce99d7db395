"""
Port (interface) for company data providers.
Infrastructure adapters (e.g. MockCompanyDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.company_data import (
    AdditionalFinancialInfo,
    CompanyIdentity,
    FinancialData,
)


class ICompanyDataProvider(ABC):
    @abstractmethod
    def get_company_identity(self, company_name: str) -> CompanyIdentity: ...

    @abstractmethod
    def get_financial_data(self, company_name: str) -> FinancialData: ...

    @abstractmethod
    def get_additional_financial_info(self, company_name: str) -> AdditionalFinancialInfo: ...
