"""Dataset Reporter Agent: ADK entry point.

Exports root_agent as required by the Google ADK framework.
Run with: adk web dataset_report_agent
"""

import os

from google.adk.agents import Agent
from google.adk.tools.function_tool import FunctionTool

from dataset_report_agent.config import Config
from dataset_report_agent.prompts.reporter import REPORTER_PROMPT
from dataset_report_agent.tools import dataset

root_agent = Agent(
    name="DatasetReporter",
    description=(
        "Dataset analysis assistant. Previews CSV files, computes per-column "
        "statistics, suggests fill values for missing data and saves "
        "Markdown reports."
    ),
    model=os.getenv("REPORTER_MODEL", Config.DEFAULT_MODEL),
    instruction=REPORTER_PROMPT,
    tools=[
        FunctionTool(func=dataset.read_csv),
        FunctionTool(func=dataset.compute_stats),
        FunctionTool(func=dataset.suggest_replacements),
        FunctionTool(func=dataset.save_file),
        FunctionTool(func=dataset.save_stats_md),
    ],
)
