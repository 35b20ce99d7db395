"""Tests for the mock company data provider."""

import logging

import pytest

from src.domain.entities.company_data import (
    AdditionalFinancialInfo,
    CompanyIdentity,
    FinancialData,
)
from src.infrastructure.company_data.mock_company_data_provider import MockCompanyDataProvider


@pytest.mark.parametrize("company", ["Acme", "Maroc Telecom", ""])
def test_company_identity_constants(company):
    identity = MockCompanyDataProvider().get_company_identity(company)

    assert identity == CompanyIdentity(
        company_name=company,
        country="Morocco",
        industry_domain="Telecom",
        founded_year=1911,
    )


def test_financial_data_constants():
    data = MockCompanyDataProvider().get_financial_data("Acme")

    assert data == FinancialData(
        turnover=(1_000_000, 2_000_000, 3_000_000),
        profit=(10_000, 20_000, 30_000),
        stock=(450, 460, 480, 480, 320, 340, 250),
    )


def test_additional_financial_info_constant():
    info = MockCompanyDataProvider().get_additional_financial_info("Acme")

    assert info == AdditionalFinancialInfo(
        additional_financial_infos="The number of subscribers is the very upward trend in the last years"
    )


def test_records_are_independent_of_company_name():
    provider = MockCompanyDataProvider()

    assert provider.get_financial_data("Acme") == provider.get_financial_data("Globex")


def test_logs_each_invocation(caplog):
    with caplog.at_level(logging.INFO):
        MockCompanyDataProvider().get_financial_data("Acme")

    assert "company=Acme" in caplog.text
