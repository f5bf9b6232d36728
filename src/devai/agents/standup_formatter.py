import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from devai.agents.model import ModelClient
from devai.tools import today_label
from devai.utils import StandupStore, extract_today

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """You are DevAI's Standup Formatter - a specialized tool for formatting daily standup updates.

If the user asks who you are or what you do:
- Respond: "I'm DevAI's Standup Formatter. I help format your daily standup updates. Just provide your tasks with project names, and I'll organize them professionally."

If no project name is provided:
- Use "General" as the default project name
- Still format the tasks professionally

If input is unclear or contains no tasks:
- Ask for clarification: "Please provide your tasks in this format: <project-name> <task description>"

For valid standup input, your job is to:
1. Parse and understand the tasks from the input
2. Identify ALL project names mentioned (even if scattered throughout the text)
3. Group all tasks belonging to the same project together
4. Clean up and rewrite task descriptions professionally
5. Format the output exactly like this:

Updates [DD/MM/YYYY - DayName]:-
<Project Name>:
- formatted task 1
- formatted task 2

<Another Project Name>:
- formatted task

Rules:
- Group tasks by project name (combine tasks for same project even if mentioned separately)
- Use "General" if no project name is specified
- Use bullet points for each task
- Keep task descriptions concise and professional
- Use past tense for completed tasks (e.g., "Implemented", "Fixed", "Added", "Updated")
- Capitalize project names properly
- Fix typos and grammar in task descriptions
- Never copy the user's input directly - always reformat it
- Only output the formatted standup (unless asked about yourself)
- Always use the date given as "Today's date" in the header

Examples:

Input: "who are you"
Output: I'm DevAI's Standup Formatter. I help format your daily standup updates. Just provide your tasks with project names, and I'll organize them professionally.

Input: "fixed login bug, added validation"
Output:
Updates [03/12/2025 - Wednesday]:-
General:
- Fixed login bug
- Added validation

Input: "huntgate fixed bug, standup-mgmt api done, also huntgate css fix"
Output:
Updates [03/12/2025 - Wednesday]:-
Huntgate:
- Fixed bug
- Fixed CSS issues

Standup-mgmt:
- Implemented API functionality"""


class StandupResult(BaseModel):
    fragment: str
    merged: Optional[str] = None
    display: str


def build_prompt(text: str, now: datetime | None = None) -> str:
    return f"Today's date is: {today_label(now)}\n\nFormat these tasks:\n{text}"


def format_standup(
    client: ModelClient,
    text: str,
    output: Path | str | None = None,
    show_all_today: bool = False,
    now: datetime | None = None,
) -> StandupResult:
    """
    Ask the model to format ``text`` as a standup report.

    Parameters
    ----------
    client : ModelClient
        Chat model used for formatting.
    text : str
        Free-text updates, e.g. ``"huntgate fixed bug, standup-mgmt api done"``.
    output : Path or str, optional
        Report file to merge the fresh fragment into. The directory guard
        runs before the model is called, so a bad path costs no request.
    show_all_today : bool, optional
        Display today's whole merged block instead of just the fragment.
        Only meaningful together with ``output``.
    now : datetime, optional
        Clock override for the date label and the today lookup.

    Returns
    -------
    StandupResult
        The model's fragment, the merged file contents (if any), and the
        text to show the user.
    """
    store = StandupStore(output) if output else None
    existed = None
    if store is not None:
        existed = store.exists()

    fragment = client.generate(build_prompt(text, now), SYSTEM_INSTRUCTION)
    if store is None:
        if show_all_today:
            logger.warning("--show-all-today needs an output file; showing the fresh update only")
        return StandupResult(fragment=fragment, display=fragment)

    merged = store.merge(fragment, existed=existed)
    display = fragment
    if show_all_today:
        today = extract_today(merged, now)
        if today is None:
            logger.info("No block for today in %s; showing the fresh update", store.path)
        else:
            display = today
    return StandupResult(fragment=fragment, merged=merged, display=display)
