"""Example generation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerationClient and register the provider in GeneratorFactory.
"""

from typing import ClassVar

from app.generation.client_base import BaseGenerationClient


class ExampleClientAdapter(BaseGenerationClient):
    """Example adapter that returns a fixed five-section report.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_REPORT: ClassVar[str] = (
        "## Executive Summary\n"
        "Example report generated without an AI provider.\n\n"
        "## Actionable Insights\n"
        "* Connect a real generation provider.\n\n"
        "## KPIs & Trends\n"
        "* Rows analysed: n/a\n\n"
        "## ROI & Forecast\n"
        "Projected ROI %: 0%\n\n"
        "## Critical Alerts\n"
        "No Critical Alerts Detected.\n"
    )

    def generate_text(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, system_prompt, user_prompt
        return self.DEFAULT_REPORT
