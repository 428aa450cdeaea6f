"""
Prompt and structured output schema for the impact analysis call.

The response schema constrains Gemini to return ONLY a JSON array of
impacted closures; the service never parses free text.
"""
import json
from typing import Any, Dict, List

from ...common.schemas.analysis import ClosureAnalysisInput


# ----------------------------
# Structured Output Schema
# ----------------------------
IMPACT_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "id": {
                "type": "NUMBER",
                "description": "The id of the lane closure that impacts the user's driving plan",
            },
            "analysis": {
                "type": "STRING",
                "description": "Analysis of how this specific lane closure affects the user's driving plan",
            },
            "impactScore": {
                "type": "OBJECT",
                "properties": {
                    "level": {
                        "type": "STRING",
                        "enum": ["Low", "Medium", "High", "Severe"],
                        "description": "Impact level label",
                    },
                    "value": {
                        "type": "NUMBER",
                        "description": "1 = Low, 2 = Medium, 3 = High, 4 = Severe",
                    },
                },
                "required": ["level", "value"],
                "description": "Magnitude and directness of the impact on the user's route",
            },
        },
        "required": ["id", "analysis", "impactScore"],
    },
}


SYSTEM_INSTRUCTION = """
<instructions>
  <general_instructions>
    Review the driving plan and the list of active lane closures. For each lane closure that materially affects the driving plan, explain how and why it could affect the user, addressing the user directly ("you", "your").

    Treat the driving plan as a one-way trip unless the user explicitly mentions a return trip.

    When fields disagree about direction or other details, trust them in this order: Route > From/To > Details > Remarks.

    A closure has a material impact if it is directly on the user's route, or if it is on a nearby road and is likely to affect the user's route indirectly (for example by causing congestion spillover or forcing lane changes). Its scheduled time must also overlap the time of the driving plan. Leave out every closure that does not meet these criteria.
  </general_instructions>

  <closure_requirements>
    <requirement>
      <id_info>The closure's id. Put it in the structured id field ONLY. Never mention closure ids in the analysis text.</id_info>
    </requirement>
    <requirement>
      <analysis_info>
        A short analysis of how the closure might affect the drive.
        <tone_and_style>
          Use a neutral, factual and direct tone. No empathetic or conversational language.
          Use short sentences and common words, simple enough for a 12-year-old. Be as brief as possible.
          Each analysis must stand on its own. Do not refer to other closures or other analyses.
        </tone_and_style>
      </analysis_info>
    </requirement>
    <requirement>
      <impact_score_info>
        <level>Level: one of ['Low', 'Medium', 'High', 'Severe']</level>
        <value>Value: 1 = Low, 2 = Medium, 3 = High, 4 = Severe</value>
      </impact_score_info>
    </requirement>
  </closure_requirements>

  <impact_score_guidelines>
    <impact_level name="Low Impact">
      <scenarios>Shoulder closures, brief off-peak single-lane closures.</scenarios>
      <effect>Minimal disruption; normal speeds likely; no significant delays.</effect>
    </impact_level>
    <impact_level name="Medium Impact">
      <scenarios>Single-lane closures during regular or peak hours, short full closures with detours, multi-lane off-peak closures.</scenarios>
      <effect>Some disruption; slight to moderate delays; traffic generally keeps flowing.</effect>
    </impact_level>
    <impact_level name="High Impact">
      <scenarios>Multiple lane closures or reductions, long-term lane reductions, some full road closures in high-traffic areas.</scenarios>
      <effect>Significant disruption; notable delays and congestion; consider alternate routes.</effect>
    </impact_level>
    <impact_level name="Severe Impact">
      <scenarios>Complete roadway closures, significant long-term reductions, often caused by incidents or emergencies.</scenarios>
      <effect>Major, widespread disruption; extensive delays; detours and alternate routes required.</effect>
    </impact_level>
  </impact_score_guidelines>
</instructions>
"""


def build_prompt(closures: List[ClosureAnalysisInput], driving_plan: str) -> str:
    payload = [c.model_dump(by_alias=True) for c in closures]
    return (
        "\nAnalyze the following lane closure information in the context of the user's driving plan.\n\n"
        "**Lane Closures:**\n"
        "```json\n"
        f"{json.dumps(payload, indent=2)}\n"
        "```\n\n"
        "**User's Driving Plan:**\n"
        f"\"{driving_plan}\"\n"
    )
