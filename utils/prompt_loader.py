"""
Utility to load and format prompt templates from markdown files

This keeps prompts clean and separated from code logic.
Templates live under prompts/<mode>/<name>.md and use str.format
placeholders, so literal braces in a template must be doubled.
"""

from pathlib import Path
from typing import Any

PROMPT_MODES = ("screening", "interview", "correspondence")


class PromptLoader:
    """Load and format prompt templates"""

    def __init__(self, prompts_dir: str = "prompts"):
        """
        Initialize prompt loader

        Args:
            prompts_dir: Root directory containing prompt templates
        """
        self.prompts_dir = Path(__file__).parent.parent / prompts_dir

    def load(
        self,
        template_name: str,
        mode: str = "screening",
        **kwargs: Any
    ) -> str:
        """
        Load and format a prompt template

        Args:
            template_name: Name of template file (without .md extension)
            mode: "screening", "interview" or "correspondence"
            **kwargs: Variables to substitute in template

        Returns:
            Formatted prompt string

        Examples:
            loader = PromptLoader()

            prompt = loader.load(
                "score_candidate",
                mode="screening",
                job_title="Backend Developer",
                job_description="...",
                cv_text="...",
                answers="..."
            )
        """
        template_path = self.prompts_dir / mode / f"{template_name}.md"

        if not template_path.exists():
            raise FileNotFoundError(
                f"Prompt template not found: {template_path}\n"
                f"Available modes: {', '.join(PROMPT_MODES)}"
            )

        with open(template_path, "r", encoding="utf-8") as f:
            template = f.read()

        try:
            return template.format(**kwargs)
        except KeyError as e:
            raise ValueError(
                f"Missing required variable '{e.args[0]}' for template '{template_name}' in mode '{mode}'"
            )

    def load_screening(self, template_name: str, **kwargs) -> str:
        """Convenience method for screening templates"""
        return self.load(template_name, mode="screening", **kwargs)

    def load_interview(self, template_name: str, **kwargs) -> str:
        """Convenience method for interview templates"""
        return self.load(template_name, mode="interview", **kwargs)

    def load_correspondence(self, template_name: str, **kwargs) -> str:
        """Convenience method for email and job ad templates"""
        return self.load(template_name, mode="correspondence", **kwargs)

