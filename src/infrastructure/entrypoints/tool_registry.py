"""
LangChain tool descriptors — Infrastructure entrypoint / Composition Root.

Each tool is declared explicitly as a StructuredTool with a name, a
description, a pydantic input schema and a handler bound to the injected
ICompanyDataProvider. The list returned by create_tools() is passed to
build_agent_graph() as data; nothing is discovered by introspection.
"""

import dataclasses

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from src.domain.ports.company_data_port import ICompanyDataProvider

COMPANY_IDENTITY_DESCRIPTION = """Get identity information about a given company, including:
- The name of the company
- The country of the company
- The industry domain of the company
- The founded year of the company"""

FINANCIAL_DATA_DESCRIPTION = """Get financial data about the company, including:
- The turnover of the last 3 years
- The profit of the last 3 years
- The value of the stock in the last 7 days"""

ADDITIONAL_FINANCIAL_INFO_DESCRIPTION = (
    "Get additional financial information about the company in the last years."
)


class CompanyNameInput(BaseModel):
    company_name: str = Field(description="Name of the company to analyse.")


def create_tools(provider: ICompanyDataProvider) -> list[StructuredTool]:
    """Build and return the three company data tools.

    Args:
        provider: ICompanyDataProvider implementation (e.g. MockCompanyDataProvider).

    Returns:
        List of three StructuredTools ready to be passed to build_agent_graph().
        Each tool returns its record as a plain dict.
    """

    def get_company_identity(company_name: str) -> dict:
        return dataclasses.asdict(provider.get_company_identity(company_name))

    def get_financial_data(company_name: str) -> dict:
        return dataclasses.asdict(provider.get_financial_data(company_name))

    def get_additional_financial_info(company_name: str) -> dict:
        return dataclasses.asdict(provider.get_additional_financial_info(company_name))

    return [
        StructuredTool.from_function(
            func=get_company_identity,
            name="get_company_identity",
            description=COMPANY_IDENTITY_DESCRIPTION,
            args_schema=CompanyNameInput,
        ),
        StructuredTool.from_function(
            func=get_financial_data,
            name="get_financial_data",
            description=FINANCIAL_DATA_DESCRIPTION,
            args_schema=CompanyNameInput,
        ),
        StructuredTool.from_function(
            func=get_additional_financial_info,
            name="get_additional_financial_info",
            description=ADDITIONAL_FINANCIAL_INFO_DESCRIPTION,
            args_schema=CompanyNameInput,
        ),
    ]
