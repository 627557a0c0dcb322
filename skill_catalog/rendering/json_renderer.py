"""JSON rendering of a skill catalog."""

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skill_catalog.models import ScanReport, Skill

CONTENT_FIELDS = ("content", "content_clean")


class CatalogJSONRenderer:
    """Renders skills as a JSON array of skill objects.

    Produces JSON output in the format:
    [
      {"name": "...", "description": "...", "location": "claude",
       "path": "...", "content": "...", "content_clean": "...",
       "references": [...], "scripts": [...], "metadata": {...}},
      ...
    ]
    """

    def render(
        self,
        skills: list["Skill"],
        include_content: bool = True
    ) -> str:
        """Render skills as a JSON array.

        Args:
            skills: Skills to render
            include_content: Whether to include descriptor and script
                             content. When False, ``content``,
                             ``content_clean`` and each script's
                             ``content`` are omitted.

        Returns:
            JSON string
        """
        return json.dumps(
            [self._skill_dict(skill, include_content) for skill in skills],
            indent=2,
            ensure_ascii=False,
        )

    def render_report(self, report: "ScanReport", include_content: bool = True) -> str:
        """Render a scan report as a JSON object with skills and failures."""
        data = report.to_dict()
        data["skills"] = [self._skill_dict(skill, include_content) for skill in report.skills]
        return json.dumps(data, indent=2, ensure_ascii=False)

    def _skill_dict(self, skill: "Skill", include_content: bool) -> dict:
        skill_dict = skill.to_dict()
        if not include_content:
            for key in CONTENT_FIELDS:
                skill_dict.pop(key)
            for script in skill_dict["scripts"]:
                script.pop("content")
        return skill_dict
